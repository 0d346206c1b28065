"""Tests for the row typed-parser."""

from __future__ import annotations

from decimal import Decimal

import pytest

from typedtable.core.exceptions import TableReadError, UnknownCellTypeError
from typedtable.models.errors import (
    CellParseFailed,
    EmptyInput,
    RowLengthError,
    RowTooLong,
    RowTooShort,
)
from typedtable.models.outcome import Failure, Success
from typedtable.models.table import Table
from typedtable.parsing.row_parser import parse_table, split_fields


class TestSuccess:
    def test_integer_table(self):
        outcome = parse_table(["a,b", "1,2", "3,4"], "int")
        assert isinstance(outcome, Success)
        assert outcome.value == Table(header=["a", "b"], rows=[[1, 2], [3, 4]])

    def test_header_only_is_valid(self):
        table = parse_table(["a,b,c"], "int").unwrap()
        assert table.header == ["a", "b", "c"]
        assert table.rows == []

    def test_empty_header_line_is_one_empty_field(self):
        table = parse_table([""], "int").unwrap()
        assert table.header == [""]

    def test_header_is_not_trimmed(self):
        assert parse_table([" a , b"], "int").unwrap().header == [" a ", " b"]

    def test_every_row_matches_header_width(self):
        lines = ["x,y,z"] + [f"{i},{i + 1},{i + 2}" for i in range(50)]
        table = parse_table(lines, "int").unwrap()
        assert len(table.rows) == len(lines) - 1
        assert all(len(row) == len(table.header) for row in table.rows)

    def test_decimal_cells(self):
        table = parse_table(["price", "1.50", "-2"], "decimal").unwrap()
        assert table.column("price") == [Decimal("1.50"), Decimal("-2")]

    def test_accepts_plain_callable(self):
        table = parse_table(["a,b", "x,y"], str.upper).unwrap()
        assert table.rows == [["X", "Y"]]

    def test_default_cell_type_is_int(self):
        assert parse_table(["a", "7"]).unwrap().rows == [[7]]

    def test_parsing_is_deterministic(self):
        lines = ["a,b", "1,2", "3,4"]
        assert parse_table(lines, "int") == parse_table(lines, "int")


class TestFailures:
    def test_empty_input(self):
        outcome = parse_table([], "int")
        assert isinstance(outcome, Failure)
        assert outcome.error == EmptyInput()

    def test_short_row(self):
        outcome = parse_table(["a,b", "1"], "int")
        assert isinstance(outcome.error, RowTooShort)
        assert outcome.error.length == RowLengthError(line_number=1, actual_count=1)

    def test_long_row(self):
        outcome = parse_table(["a,b", "1,2,3"], "int")
        assert isinstance(outcome.error, RowTooLong)
        assert (outcome.error.line_number, outcome.error.actual_count) == (1, 3)

    def test_bad_cell_reports_raw_token(self):
        outcome = parse_table(["a,b", "x,2"], "int")
        assert outcome.error == CellParseFailed(token="x", line_number=1, column=1)

    def test_line_number_excludes_header(self):
        outcome = parse_table(["a,b", "1,2", "3,4", "5"], "int")
        assert outcome.error.line_number == 3

    def test_cell_failure_wins_over_width_failure(self):
        outcome = parse_table(["a,b", "1,2,oops"], "int")
        assert isinstance(outcome.error, CellParseFailed)
        assert outcome.error.column == 3

    def test_stops_at_first_bad_row(self):
        seen = []

        def tracking(text: str) -> int:
            seen.append(text)
            return int(text)

        parse_table(["a", "1", "2,3", "4"], tracking)
        assert seen == ["1", "2", "3"]

    def test_blank_data_line_fails_as_empty_token(self):
        outcome = parse_table(["a", ""], "int")
        assert outcome.error == CellParseFailed(token="", line_number=1, column=1)

    def test_whitespace_is_not_trimmed_from_cells(self):
        outcome = parse_table(["a,b", "1, 2"], "int")
        assert outcome.error.token == " 2"

    def test_unwrap_raises_with_variant(self):
        with pytest.raises(TableReadError) as info:
            parse_table(["a,b", "1"], "int").unwrap()
        assert isinstance(info.value.error, RowTooShort)

    def test_unknown_cell_type_is_a_programming_error(self):
        with pytest.raises(UnknownCellTypeError):
            parse_table(["a"], "complex")


class TestSplitFields:
    def test_comma_is_a_hard_delimiter(self):
        assert split_fields('"a,b",c') == ['"a', 'b"', "c"]

    def test_trailing_comma_adds_empty_field(self):
        assert split_fields("1,2,") == ["1", "2", ""]
