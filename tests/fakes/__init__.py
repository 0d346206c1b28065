"""Shared test doubles — re-export in-memory loaders."""

from __future__ import annotations

from typedtable.ingest.memory_loader import MemoryLineLoader

__all__ = ["MemoryLineLoader"]
