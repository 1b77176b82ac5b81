"""Logbook related dependency providers."""

from __future__ import annotations

import logging
import re

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from fieldday.modules.logbook import InvalidInputError, LogbookService, LogEntryInput

from .database import get_db_session

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
_MAX_ID = 2**63 - 1

ENTRY_FIELDS = ("callsign", "time", "frequency", "mode", "notes")

_URLENCODED = "application/x-www-form-urlencoded"
# a "%" that does not start a two-digit hex escape
_BAD_ESCAPE = re.compile(rb"%(?![0-9A-Fa-f]{2})")


def get_logbook_service(db: AsyncSession = Depends(get_db_session)) -> LogbookService:
    return LogbookService.with_session(db)


def parse_entry_id(raw: str | None) -> int | None:
    """Return the id named by ``raw``, or None if it cannot name any entry."""
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    if value < 0 or value > _MAX_ID:
        return None
    return value


async def read_form(request: Request) -> dict[str, str]:
    """Parse the request body as a form; absent fields read as empty strings."""
    if request.headers.get("content-type", "").startswith(_URLENCODED):
        body = await request.body()
        if _BAD_ESCAPE.search(body):
            raise InvalidInputError("Malformed form body: invalid URL escape")

    try:
        form = await request.form()
    except (MultiPartException, StarletteHTTPException) as exc:
        raise InvalidInputError(f"Malformed form body: {exc}") from exc

    values: dict[str, str] = {}
    for key in ("id",) + ENTRY_FIELDS:
        value = form.get(key, "")
        if not isinstance(value, str):
            raise InvalidInputError(f"Field {key!r} must be a plain form value")
        values[key] = value
    return values


async def get_entry_input(form: dict[str, str] = Depends(read_form)) -> LogEntryInput:
    return LogEntryInput(**{name: form[name] for name in ENTRY_FIELDS})


__all__ = [
    "get_entry_input",
    "get_logbook_service",
    "parse_entry_id",
    "read_form",
]
