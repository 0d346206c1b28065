"""Pluggable line loaders behind the ILineLoader protocol."""

from __future__ import annotations

from typedtable.core.config import AppSettings
from typedtable.ingest.loader import FileLineLoader, load_lines
from typedtable.ingest.memory_loader import MemoryLineLoader


def create_loader(settings: AppSettings | None = None) -> FileLineLoader:
    """Create the filesystem loader from application settings."""
    if settings is None:
        settings = AppSettings()
    return FileLineLoader(encoding=settings.reader.encoding)


__all__ = ["FileLineLoader", "MemoryLineLoader", "create_loader", "load_lines"]
