"""Strict scalar parsers, selectable by name.

Python's own constructors are lenient (``int(" 7")`` and ``float("1_0")``
both succeed). The parsers here accept only the bare literal: no surrounding
whitespace, no digit-group underscores.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from typedtable.core.exceptions import UnknownCellTypeError
from typedtable.core.protocols import ICellParser
from typedtable.core.types import CellType

_INT_RE = re.compile(r"[+-]?[0-9]+")
_REAL_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)


def parse_float(text: str) -> float:
    if not _REAL_RE.fullmatch(text):
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def parse_decimal(text: str) -> Decimal:
    if not _REAL_RE.fullmatch(text):
        raise ValueError(f"invalid decimal literal: {text!r}")
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"invalid decimal literal: {text!r}") from exc


def parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"invalid bool literal: {text!r}")


def parse_str(text: str) -> str:
    return text


SCALAR_PARSERS: dict[str, ICellParser] = {
    "int": parse_int,
    "float": parse_float,
    "decimal": parse_decimal,
    "bool": parse_bool,
    "str": parse_str,
}


def resolve_cell_type(cell_type: CellType) -> ICellParser:
    """Return the parser for a registered name, or the callable unchanged."""
    if callable(cell_type):
        return cell_type
    try:
        return SCALAR_PARSERS[cell_type]
    except KeyError:
        raise UnknownCellTypeError(cell_type, sorted(SCALAR_PARSERS)) from None
