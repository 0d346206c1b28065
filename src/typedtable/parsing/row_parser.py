"""Row typed-parser: header plus lines of text into a rectangular Table."""

from __future__ import annotations

from typing import Sequence

from typedtable.core.protocols import ICellParser
from typedtable.core.types import CellType, Row
from typedtable.models.errors import (
    CellParseFailed,
    EmptyInput,
    RowLengthError,
    RowTooLong,
    RowTooShort,
)
from typedtable.models.outcome import Failure, ParseOutcome, Success
from typedtable.models.table import Table
from typedtable.parsing.scalars import resolve_cell_type

DELIMITER = ","

# Errors a scalar parser may raise for text it cannot read; decimal's
# InvalidOperation is an ArithmeticError.
CELL_ERRORS = (ValueError, ArithmeticError)


def split_fields(line: str) -> list[str]:
    """Split on every comma. No trimming, quoting or escaping."""
    return line.split(DELIMITER)


def _parse_row(tokens: list[str], parse: ICellParser, line_number: int) -> Row | CellParseFailed:
    values = []
    for column, token in enumerate(tokens, start=1):
        try:
            values.append(parse(token))
        except CELL_ERRORS:
            return CellParseFailed(token=token, line_number=line_number, column=column)
    return values


def parse_table(
    lines: Sequence[str],
    cell_type: CellType = "int",
) -> ParseOutcome:
    """Parse a header line and data lines into a Table of one scalar type.

    Args:
        lines: Raw lines, newline characters already stripped. The first is the
            header.
        cell_type: A registered scalar name (``"int"``, ``"float"``, ...) or any
            callable that turns a token into a value and raises ``ValueError``
            on bad text.

    Returns:
        ``Success(value=Table)``, or ``Failure(error=...)`` for the first
        problem found. Nothing after the first problem is examined.
    """
    parse = resolve_cell_type(cell_type)

    if not lines:
        return Failure(error=EmptyInput())

    header = split_fields(lines[0])
    width = len(header)
    rows: list[Row] = []

    for line_number, line in enumerate(lines[1:], start=1):
        parsed = _parse_row(split_fields(line), parse, line_number)
        if isinstance(parsed, CellParseFailed):
            return Failure(error=parsed)

        count = len(parsed)
        if count < width:
            return Failure(error=RowTooShort(length=RowLengthError(line_number=line_number, actual_count=count)))
        if count > width:
            return Failure(error=RowTooLong(length=RowLengthError(line_number=line_number, actual_count=count)))
        rows.append(parsed)

    return Success(value=Table(header=header, rows=rows))
