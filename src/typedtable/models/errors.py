"""Failure variants, one model per way a read can fail.

Each variant carries a literal ``kind`` so unions of them discriminate cleanly
and serialize to JSON with the kind attached.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class _Failure(BaseModel):
    """Every variant supplies a one-line ``describe()``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class RowLengthError(BaseModel):
    """Where a row of the wrong width was found and how wide it was."""

    model_config = ConfigDict(frozen=True)

    line_number: int  # 1-based, header excluded
    actual_count: int


# --- Loader failures ---

class FileNotFound(_Failure):
    kind: Literal["file_not_found"] = "file_not_found"
    path: str

    def describe(self) -> str:
        return f"{self.path} does not exist"


class OpenFailed(_Failure):
    kind: Literal["open_failed"] = "open_failed"
    path: str
    cause: OSError

    @field_serializer("cause")
    def _serialize_cause(self, cause: OSError) -> str:
        return str(cause)

    def describe(self) -> str:
        return f"could not open {self.path}: {self.cause}"


class LineDecodeFailed(_Failure):
    kind: Literal["line_decode_failed"] = "line_decode_failed"
    path: str
    line_number: int  # 1-based physical line
    cause: Exception

    @field_serializer("cause")
    def _serialize_cause(self, cause: Exception) -> str:
        return str(cause)

    def describe(self) -> str:
        return f"could not read line {self.line_number} of {self.path}: {self.cause}"


# --- Parser failures ---

class EmptyInput(_Failure):
    kind: Literal["empty_input"] = "empty_input"

    def describe(self) -> str:
        return "input has no lines, not even a header"


class CellParseFailed(_Failure):
    kind: Literal["cell_parse_failed"] = "cell_parse_failed"
    token: str
    line_number: int
    column: int

    def describe(self) -> str:
        return f"could not parse {self.token!r} (line {self.line_number}, column {self.column})"


class _RowLengthFailure(_Failure):
    length: RowLengthError

    @property
    def line_number(self) -> int:
        return self.length.line_number

    @property
    def actual_count(self) -> int:
        return self.length.actual_count


class RowTooShort(_RowLengthFailure):
    kind: Literal["row_too_short"] = "row_too_short"

    def describe(self) -> str:
        return f"line {self.line_number} has only {self.actual_count} values"


class RowTooLong(_RowLengthFailure):
    kind: Literal["row_too_long"] = "row_too_long"

    def describe(self) -> str:
        return f"line {self.line_number} has {self.actual_count} values, too many"


LoadError = Annotated[
    Union[FileNotFound, OpenFailed, LineDecodeFailed],
    Field(discriminator="kind"),
]

TableError = Annotated[
    Union[
        FileNotFound,
        OpenFailed,
        LineDecodeFailed,
        EmptyInput,
        CellParseFailed,
        RowTooShort,
        RowTooLong,
    ],
    Field(discriminator="kind"),
]
