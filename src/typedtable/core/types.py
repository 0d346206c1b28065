"""Type aliases used across typedtable."""

from __future__ import annotations

from typing import Any, Callable, Union

# A registered scalar name ("int", "float", ...) or any str -> value callable.
CellType = Union[str, Callable[[str], object]]
Row = list[Any]
