"""typedtable: read a comma-delimited text file into a typed, rectangular table.

The first line is the header; every other line must have exactly as many
comma-separated values as the header, each parsed into one caller-chosen
scalar type. Reads never raise for bad input: they return ``Success`` with a
``Table`` or ``Failure`` with the single error that stopped them.
"""

from __future__ import annotations

from typedtable.ingest.loader import FileLineLoader, load_lines
from typedtable.ingest.memory_loader import MemoryLineLoader
from typedtable.models.errors import (
    CellParseFailed,
    EmptyInput,
    FileNotFound,
    LineDecodeFailed,
    OpenFailed,
    RowLengthError,
    RowTooLong,
    RowTooShort,
)
from typedtable.models.outcome import Failure, Success
from typedtable.models.table import Table
from typedtable.parsing.row_parser import parse_table
from typedtable.parsing.scalars import resolve_cell_type
from typedtable.reader import TableReader, read_table

__all__ = [
    "CellParseFailed",
    "EmptyInput",
    "Failure",
    "FileLineLoader",
    "FileNotFound",
    "LineDecodeFailed",
    "MemoryLineLoader",
    "OpenFailed",
    "RowLengthError",
    "RowTooLong",
    "RowTooShort",
    "Success",
    "Table",
    "TableReader",
    "load_lines",
    "parse_table",
    "read_table",
    "resolve_cell_type",
]
