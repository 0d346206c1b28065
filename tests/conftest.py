"""Shared fixtures: real files on disk under tmp_path."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[bytes | str, str], str]:
    """Write bytes (or UTF-8 text) to a file and return its path as str."""

    def _write(data: bytes | str, name: str = "input.csv") -> str:
        fp = tmp_path / name
        fp.write_bytes(data.encode("utf-8") if isinstance(data, str) else data)
        return str(fp)

    return _write
