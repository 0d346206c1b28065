"""In-memory line loader — dict-backed fake for tests and in-memory text."""

from __future__ import annotations

import io

from typedtable.ingest.loader import decode_lines
from typedtable.models.errors import FileNotFound
from typedtable.models.outcome import Failure, LoadOutcome


class MemoryLineLoader:
    """Dict-backed ILineLoader; decodes exactly like FileLineLoader."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding
        self._files: dict[str, bytes] = {}

    def write(self, path: str, data: bytes | str) -> str:
        if isinstance(data, str):
            data = data.encode(self._encoding)
        self._files[path] = data
        return path

    def load(self, path: str) -> LoadOutcome:
        if path not in self._files:
            return Failure(error=FileNotFound(path=path))
        return decode_lines(io.BytesIO(self._files[path]), path, self._encoding)
