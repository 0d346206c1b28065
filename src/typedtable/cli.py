"""Command line reader: print a typed table, or the one error that stopped it.

Usage:
    typedtable data.csv --type float
    typedtable data.csv --format json
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from typedtable.core.config import AppSettings
from typedtable.models.table import Table
from typedtable.parsing.scalars import SCALAR_PARSERS
from typedtable.reader import TableReader

logger = logging.getLogger("typedtable")


def format_text(table: Table) -> str:
    lines = [",".join(table.header)]
    lines.extend(",".join(str(value) for value in row) for row in table.rows)
    return "\n".join(lines)


def build_parser(settings: AppSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="typedtable", description="Read a comma-delimited file into a typed table")
    parser.add_argument("path", help="File to read; the first line is the header")
    parser.add_argument(
        "--type",
        dest="cell_type",
        choices=sorted(SCALAR_PARSERS),
        default=settings.reader.default_cell_type,
        help="Scalar type of every cell",
    )
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (e.g. DEBUG)")
    return parser


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    settings = AppSettings()
    args = build_parser(settings).parse_args(argv)
    out = out or sys.stdout

    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")

    outcome = TableReader(settings=settings).read(args.path, args.cell_type)
    if not outcome.ok:
        logger.error("%s: %s", outcome.error.kind, outcome.error.describe())
        return 1

    table = outcome.value
    logger.debug("Read %d rows x %d columns from %s", len(table.rows), table.width, args.path)
    if args.format == "json":
        out.write(table.model_dump_json() + "\n")
    else:
        out.write(format_text(table) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
