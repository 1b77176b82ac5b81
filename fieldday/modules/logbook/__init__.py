"""Domain helpers for the contact logbook."""

from .exceptions import (
    InvalidInputError,
    LogbookError,
    LogEntryNotFoundError,
    StorageError,
)
from .models import MODES, LogEntry, LogEntryInput
from .service import LogbookService

__all__ = [
    "MODES",
    "InvalidInputError",
    "LogEntry",
    "LogEntryInput",
    "LogEntryNotFoundError",
    "LogbookError",
    "LogbookService",
    "StorageError",
]
