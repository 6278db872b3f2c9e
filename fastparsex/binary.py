"""Reading whole files or fixed-size blocks as bytes."""

from __future__ import annotations

import os

from fastparsex.errors import _open_error


class BinaryReader:
    """Reads the entire content of a file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)

    def read_all(self) -> bytes:
        try:
            with open(self.path, "rb") as f:
                return f.read()
        except OSError as exc:
            raise _open_error(exc, self.path) from exc


class BinaryParser:
    """Reads blocks at given offsets of a file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)

    def read_block(self, offset: int, length: int) -> bytes:
        """Return ``length`` bytes from ``offset``, zero-padded past end of file."""
        if offset < 0 or length < 0:
            raise ValueError("offset and length must not be negative")
        try:
            with open(self.path, "rb") as f:
                f.seek(offset)
                data = f.read(length)
        except OSError as exc:
            raise _open_error(exc, self.path) from exc
        return data.ljust(length, b"\0")