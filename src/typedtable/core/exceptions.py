"""typedtable exception hierarchy.

Parse and load failures are returned as typed outcomes, not raised. These
exceptions cover programming errors and the explicit ``unwrap()`` escape hatch.
"""

from __future__ import annotations

from typing import Any


class TypedTableError(Exception):
    """Base exception for all typedtable errors."""


class TableReadError(TypedTableError):
    """A failed outcome was unwrapped."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f"Table read failed ({error.kind}): {error.describe()}")


class UnknownCellTypeError(TypedTableError):
    """No scalar parser is registered under the requested name."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"Unknown cell type {name!r}; expected one of {', '.join(known)}")

