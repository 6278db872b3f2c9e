"""Error codes and the exception raised by the parsers."""

from __future__ import annotations

import os
from enum import Enum


class ErrorCode(Enum):
    """Kinds of failure a parser can report."""

    OK = "ok"
    FILE_NOT_FOUND = "file_not_found"
    IO_ERROR = "io_error"
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    PARSE_ERROR = "parse_error"
    EOF = "eof"
    UNKNOWN = "unknown"


class FastParseError(Exception):
    """Raised when a file cannot be opened, read or parsed."""

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return f"{self.code.value}: {self.message}"
        return self.code.value


def _open_error(exc: OSError, path: str | os.PathLike) -> FastParseError:
    """Turn an OSError raised while opening ``path`` into a FastParseError."""
    code = ErrorCode.FILE_NOT_FOUND if isinstance(exc, FileNotFoundError) else ErrorCode.IO_ERROR
    return FastParseError(code, f"cannot open {os.fspath(path)}: {exc.strerror or exc}")