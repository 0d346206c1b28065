"""Filesystem line loader implementing ILineLoader."""

from __future__ import annotations

import os
from typing import BinaryIO

from typedtable.models.errors import FileNotFound, LineDecodeFailed, OpenFailed
from typedtable.models.outcome import Failure, LoadOutcome, Success


def strip_newline(raw: bytes) -> bytes:
    """Drop one trailing ``\\n`` or ``\\r\\n``."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def decode_lines(stream: BinaryIO, path: str, encoding: str = "utf-8") -> LoadOutcome:
    """Decode every line of an open binary stream, stopping at the first bad one."""
    lines: list[str] = []
    line_number = 0
    try:
        for raw in stream:
            line_number += 1
            lines.append(strip_newline(raw).decode(encoding))
    except UnicodeDecodeError as exc:
        return Failure(error=LineDecodeFailed(path=path, line_number=line_number, cause=exc))
    except OSError as exc:
        # the read of the next line is what failed
        return Failure(error=LineDecodeFailed(path=path, line_number=line_number + 1, cause=exc))
    return Success(value=lines)


class FileLineLoader:
    """Production ILineLoader reading a whole file from local disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def load(self, path: str) -> LoadOutcome:
        # os.path.exists reports every stat error (and "") as missing
        if not os.path.exists(path):
            return Failure(error=FileNotFound(path=str(path)))

        try:
            handle = open(path, "rb")
        except OSError as exc:
            return Failure(error=OpenFailed(path=str(path), cause=exc))

        with handle:
            return decode_lines(handle, str(path), self._encoding)


def load_lines(path: str, encoding: str = "utf-8") -> LoadOutcome:
    """Read ``path`` into its list of lines, newline characters stripped.

    Returns ``Failure(FileNotFound)`` without touching the file when the path
    does not exist, ``Failure(OpenFailed)`` when it exists but cannot be
    opened, and ``Failure(LineDecodeFailed)`` for the first line that cannot be
    read as text. No partial line list is ever returned.
    """
    return FileLineLoader(encoding=encoding).load(path)
