"""Throughput measurements for the binary, CSV and log readers."""

from __future__ import annotations

import argparse
import math
import os
import sys
import time

from fastparsex.binary import BinaryReader
from fastparsex.csv_parser import CSVParser
from fastparsex.errors import FastParseError, _open_error
from fastparsex.log_parser import LogParser


def file_size(path: str | os.PathLike) -> int:
    try:
        return os.path.getsize(path)
    except OSError as exc:
        raise _open_error(exc, path) from exc


class Timer:
    """Wall-clock stopwatch."""

    def __init__(self) -> None:
        self.start = time.perf_counter()

    def tic(self) -> None:
        self.start = time.perf_counter()

    def toc(self) -> float:
        return time.perf_counter() - self.start


def format_result(name: str, seconds: float, size: int) -> str:
    mb = size / (1024.0 * 1024.0)
    if seconds:
        mbps = mb / seconds
    else:
        mbps = math.inf if mb else math.nan
    return (
        f"{name}:\n"
        f"  Time: {seconds:g} s\n"
        f"  Size: {mb:g} MB\n"
        f"  Throughput: {mbps:g} MB/s\n\n"
    )


def bench_binary(path: str | os.PathLike) -> float:
    reader = BinaryReader(path)
    timer = Timer()
    timer.tic()
    reader.read_all()
    return timer.toc()


def bench_csv(path: str | os.PathLike) -> float:
    with CSVParser(path) as parser:
        timer = Timer()
        timer.tic()
        for _ in parser:
            pass
        return timer.toc()


def bench_log(path: str | os.PathLike) -> float:
    parser = LogParser(path)
    parser.on_record(lambda fields: None)
    timer = Timer()
    timer.tic()
    parser.parse()
    return timer.toc()


_BENCHMARKS = {
    "binary": ("BINARY Benchmark", "sample.bin", bench_binary),
    "csv": ("CSV Benchmark", "sample.csv", bench_csv),
    "log": ("LOG Benchmark", "sample.log", bench_log),
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fastparsex-bench", description="Measure parsing throughput.")
    parser.add_argument("kind", choices=sorted(_BENCHMARKS))
    parser.add_argument("path", nargs="?")
    args = parser.parse_args(argv)

    name, default_path, run = _BENCHMARKS[args.kind]
    path = args.path or default_path
    try:
        size = file_size(path)
        seconds = run(path)
    except FastParseError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(format_result(name, seconds, size), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())