"""Splitting delimited text into fields, one buffer chunk per row."""

from __future__ import annotations

import codecs
import os
from collections.abc import Iterator
from dataclasses import dataclass

from fastparsex.file_reader import FileReader


@dataclass(frozen=True)
class CSVConfig:
    """Delimiter and quote character used when splitting fields."""

    delimiter: str = ","
    quote_char: str = '"'
    has_header: bool = True

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1 or len(self.quote_char) != 1:
            raise ValueError("delimiter and quote_char must be single characters")


def split_fields(text: str, config: CSVConfig | None = None) -> list[str]:
    """Split ``text`` on the delimiter, honouring quoted sections.

    Quote characters toggle quoting and are dropped. A trailing empty
    field is not reported.
    """
    config = config or CSVConfig()
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for ch in text:
        if ch == config.quote_char:
            in_quotes = not in_quotes
        elif ch == config.delimiter and not in_quotes:
            fields.append("".join(current))
            current.clear()
        else:
            current.append(ch)
    if current:
        fields.append("".join(current))
    return fields


class CSVParser:
    """Yields the fields of each chunk read from a file."""

    def __init__(self, path: str | os.PathLike, config: CSVConfig | None = None) -> None:
        self.config = config or CSVConfig()
        self._reader = FileReader(path)
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def next_row(self) -> list[str] | None:
        """Return the next row of fields, or None at end of file."""
        chunk = self._reader.read_chunk()
        if not chunk:
            return None
        text = self._decoder.decode(chunk, final=self._reader.eof)
        return split_fields(text, self.config)

    def __iter__(self) -> Iterator[list[str]]:
        while (row := self.next_row()) is not None:
            yield row

    def close(self) -> None:
        self._reader.close()

    def __enter__(self) -> "CSVParser":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class CSVReader:
    """Reads every row of a file with the default configuration."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)

    def read_all(self) -> list[list[str]]:
        with CSVParser(self.path) as parser:
            return list(parser)