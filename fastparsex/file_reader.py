"""Chunked reading of files in fixed-size blocks."""

from __future__ import annotations

import os
from collections.abc import Iterator

from fastparsex.errors import ErrorCode, FastParseError, _open_error

DEFAULT_BUFFER_SIZE = 64 * 1024


class FileReader:
    """Reads a file in chunks of at most ``buf_size`` bytes."""

    def __init__(self, path: str | os.PathLike, buf_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buf_size <= 0:
            raise ValueError("buf_size must be positive")
        self.path = os.fspath(path)
        self.buf_size = buf_size
        self.eof = False
        try:
            self._file = open(self.path, "rb")
        except OSError as exc:
            raise _open_error(exc, self.path) from exc

    def read_chunk(self) -> bytes:
        """Return the next chunk, or ``b""`` once the file is exhausted."""
        if self._file is None:
            raise FastParseError(ErrorCode.IO_ERROR, "reader is closed")
        if self.eof:
            return b""
        try:
            chunk = self._file.read(self.buf_size)
        except OSError as exc:
            raise FastParseError(ErrorCode.IO_ERROR, str(exc)) from exc
        if len(chunk) < self.buf_size:
            self.eof = True
        return chunk

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __iter__(self) -> Iterator[bytes]:
        while chunk := self.read_chunk():
            yield chunk

    def __enter__(self) -> "FileReader":
        return self

    def __exit__(self, *args) -> None:
        self.close()