"""Export of parsed data to a file."""

from __future__ import annotations

import os

from fastparsex.errors import _open_error


class ArrowWriter:
    """Writes an output file; the file is created empty."""

    def write(self, path: str | os.PathLike) -> None:
        try:
            with open(path, "wb"):
                pass
        except OSError as exc:
            raise _open_error(exc, path) from exc