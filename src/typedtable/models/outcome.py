"""Result types: every read returns exactly one Success or one Failure."""

from __future__ import annotations

from typing import Generic, NoReturn, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from typedtable.core.exceptions import TableReadError
from typedtable.models.errors import LoadError, TableError
from typedtable.models.table import Table

V = TypeVar("V")
E = TypeVar("E")


class Success(BaseModel, Generic[V]):
    """A fully validated value."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: V

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> V:
        return self.value


class Failure(BaseModel, Generic[E]):
    """The single error that stopped the read."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: E

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise TableReadError(self.error)


LoadOutcome = Union[Success[list[str]], Failure[LoadError]]

ParseOutcome = Union[Success[Table], Failure[TableError]]
