"""Protocol interfaces for typedtable collaborators.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from typedtable.models.outcome import LoadOutcome

T_co = TypeVar("T_co", covariant=True)


# ---------------------------------------------------------------------------
# Cell parsing
# ---------------------------------------------------------------------------

@runtime_checkable
class ICellParser(Protocol[T_co]):
    """Turns one raw token into a scalar; raises ValueError on bad text."""

    def __call__(self, text: str) -> T_co: ...


# ---------------------------------------------------------------------------
# Line loading
# ---------------------------------------------------------------------------

@runtime_checkable
class ILineLoader(Protocol):
    """Source of the raw, newline-stripped lines of one document."""

    def load(self, path: str) -> LoadOutcome: ...
