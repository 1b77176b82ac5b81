"""Reusable FastAPI dependencies."""

from .container import get_container, get_renderer
from .database import get_db_session
from .logbook import get_entry_input, get_logbook_service, parse_entry_id, read_form

__all__ = [
    "get_container",
    "get_db_session",
    "get_entry_input",
    "get_logbook_service",
    "get_renderer",
    "parse_entry_id",
    "read_form",
]
