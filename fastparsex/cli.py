"""Command line for reading binary, CSV and log files and exporting output."""

from __future__ import annotations

import argparse
import sys

from fastparsex.binary import BinaryReader
from fastparsex.csv_parser import CSVParser
from fastparsex.errors import FastParseError
from fastparsex.export import ArrowWriter
from fastparsex.log_parser import LogParser, apache_common


def _bracketed(label: str, fields: list[str]) -> str:
    return label + "".join(f"[{field}] " for field in fields)


def _run_binary(path: str) -> int:
    try:
        data = BinaryReader(path).read_all()
    except FastParseError:
        print("Failed to read file", file=sys.stderr)
        return 1
    print(f"Read {len(data)} bytes")
    return 0


def _run_csv(path: str) -> int:
    with CSVParser(path) as parser:
        for row in parser:
            print(_bracketed("Row: ", row))
    return 0


def _run_log(path: str) -> int:
    parser = LogParser(path, apache_common())
    parser.on_record(lambda fields: print(_bracketed("Record: ", fields)))
    parser.parse()
    return 0


def _run_export(path: str) -> int:
    ArrowWriter().write(path)
    print("Export completed")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fastparsex")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, default in (
        ("binary", "sample.bin"),
        ("csv", "sample.csv"),
        ("log", "sample.log"),
        ("export", "output.arrow"),
    ):
        sub = commands.add_parser(name)
        sub.add_argument("path", nargs="?", default=default)
    args = parser.parse_args(argv)

    runners = {"binary": _run_binary, "csv": _run_csv, "log": _run_log, "export": _run_export}
    try:
        return runners[args.command](args.path)
    except FastParseError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())