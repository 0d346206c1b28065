"""Parse posted text into a typed table."""

from __future__ import annotations

import io
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel, ConfigDict

from typedtable.core.config import AppSettings
from typedtable.core.exceptions import UnknownCellTypeError
from typedtable.ingest.loader import decode_lines
from typedtable.models.errors import TableError
from typedtable.models.table import Table
from typedtable.parsing.row_parser import parse_table
from typedtable.parsing.scalars import resolve_cell_type

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tables"])


class ParseRequest(BaseModel):
    text: str
    cell_type: str = "int"


class ParseResponse(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")

    ok: bool
    table: Optional[Table] = None
    error: Optional[TableError] = None


def _respond(status_code: int, payload: ParseResponse) -> Response:
    # Decimal cells go out as strings; inf and nan as the JSON constants
    return Response(
        status_code=status_code,
        content=payload.model_dump_json(exclude_none=True),
        media_type="application/json",
    )


@router.post("/parse")
async def parse(body: ParseRequest, request: Request) -> Response:
    """Run the row parser over ``text``; one table or one error comes back."""
    settings: AppSettings = getattr(request.app.state, "settings", None) or AppSettings()

    try:
        cell_parser = resolve_cell_type(body.cell_type)
    except UnknownCellTypeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    data = body.text.encode("utf-8", errors="surrogatepass")
    outcome = decode_lines(io.BytesIO(data), "<request>")
    if outcome.ok:
        lines = outcome.value
        if len(lines) > settings.api.max_body_lines:
            raise HTTPException(
                status_code=413,
                detail=f"{len(lines)} lines exceeds the limit of {settings.api.max_body_lines}",
            )
        outcome = parse_table(lines, cell_parser)

    if not outcome.ok:
        logger.info("Rejected table: %s", outcome.error.describe())
        return _respond(422, ParseResponse(ok=False, error=outcome.error))
    return _respond(200, ParseResponse(ok=True, table=outcome.value))
