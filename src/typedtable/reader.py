"""TableReader — loads a file and parses it into a typed Table."""

from __future__ import annotations

from typedtable.core.config import AppSettings
from typedtable.core.protocols import ILineLoader
from typedtable.core.types import CellType
from typedtable.ingest import create_loader
from typedtable.models.outcome import ParseOutcome
from typedtable.parsing.row_parser import parse_table


class TableReader:
    """Composes a line loader with the row parser.

    Settings and the loader are injected at construction time; both default
    to the filesystem setup described by ``AppSettings``.
    """

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        loader: ILineLoader | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._loader = loader or create_loader(self._settings)

    def read(
        self,
        path: str,
        cell_type: CellType | None = None,
    ) -> ParseOutcome:
        """Load every line of ``path``, then parse them; first failure wins."""
        if cell_type is None:
            cell_type = self._settings.reader.default_cell_type
        loaded = self._loader.load(path)
        if not loaded.ok:
            return loaded
        return parse_table(loaded.value, cell_type)


def read_table(
    path: str,
    cell_type: CellType = "int",
    *,
    settings: AppSettings | None = None,
) -> ParseOutcome:
    """Read ``path`` into a Table whose every cell is parsed by ``cell_type``."""
    return TableReader(settings=settings).read(path, cell_type)
