"""SQLAlchemy repository implementations."""

from .log_entry_repository import SqlLogEntryRepository

__all__ = ["SqlLogEntryRepository"]
