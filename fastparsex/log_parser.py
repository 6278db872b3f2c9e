"""Line-oriented log reading, split into whitespace-separated fields."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

from fastparsex.errors import ErrorCode, FastParseError, _open_error

# The C-locale whitespace set: space, tab, newline, vertical tab, form feed, CR.
_C_SPACE = re.compile(r"[ \t\n\v\f\r]+")

RecordCallback = Callable[[list[str]], None]


class LogFormat(Enum):
    APACHE_COMMON = "apache_common"
    APACHE_COMBINED = "apache_combined"
    NGINX = "nginx"
    CUSTOM = "custom"


@dataclass(frozen=True)
class LogConfig:
    format: LogFormat
    custom_pattern: str = ""


def apache_common() -> LogConfig:
    return LogConfig(LogFormat.APACHE_COMMON)


def apache_combined() -> LogConfig:
    return LogConfig(LogFormat.APACHE_COMBINED)


def nginx() -> LogConfig:
    return LogConfig(LogFormat.NGINX)


def custom(pattern: str) -> LogConfig:
    return LogConfig(LogFormat.CUSTOM, pattern)


def split_line(line: str) -> list[str]:
    """Split a line on whitespace; a NUL character ends the line."""
    line = line.split("\0", 1)[0]
    return [field for field in _C_SPACE.split(line) if field]


class LogReader:
    """Yields the lines of a file without their trailing newline."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)
        try:
            self._file = open(self.path, encoding="utf-8", errors="replace", newline="\n")
        except OSError as exc:
            raise _open_error(exc, self.path) from exc

    def __iter__(self) -> Iterator[str]:
        if self._file is None:
            raise FastParseError(ErrorCode.IO_ERROR, "reader is closed")
        for raw in self._file:
            yield raw[:-1] if raw.endswith("\n") else raw

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "LogReader":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class LogParser:
    """Splits each line of a log file into fields and reports them."""

    def __init__(self, path: str | os.PathLike, config: LogConfig | None = None) -> None:
        self.path = os.fspath(path)
        self.config = config if config is not None else apache_common()
        self._callback: RecordCallback | None = None

    def on_record(self, callback: RecordCallback | None) -> None:
        """Set the function called with the fields of each record."""
        self._callback = callback

    def records(self) -> Iterator[list[str]]:
        with LogReader(self.path) as reader:
            for line in reader:
                yield split_line(line)

    def parse(self) -> int:
        """Parse the whole file, calling the callback per record; return the record count."""
        count = 0
        for fields in self.records():
            count += 1
            if self._callback is not None:
                self._callback(fields)
        return count