"""The validated, rectangular result of a parse."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class Table(BaseModel, Generic[T]):
    """Header plus equal-width rows of one scalar type.

    Every row has exactly ``len(header)`` values; building a table that breaks
    this fails validation, so a malformed table never exists.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, ser_json_inf_nan="constants")

    header: list[str]
    rows: list[list[T]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_rectangular(self) -> Table[T]:
        width = len(self.header)
        for index, row in enumerate(self.rows, start=1):
            if len(row) != width:
                raise ValueError(f"row {index} has {len(row)} values, header has {width}")
        return self

    @property
    def width(self) -> int:
        return len(self.header)

    def column(self, name: str) -> list[T]:
        """Values of the first column called ``name``."""
        try:
            position = self.header.index(name)
        except ValueError:
            raise KeyError(name) from None
        return [row[position] for row in self.rows]

    def records(self) -> list[dict[str, Any]]:
        """Rows keyed by header name; a repeated name keeps its last value."""
        return [dict(zip(self.header, row)) for row in self.rows]
