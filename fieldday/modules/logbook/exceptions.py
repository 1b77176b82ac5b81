"""Logbook domain specific exceptions."""


class LogbookError(Exception):
    """Base class for logbook related errors."""


class InvalidInputError(LogbookError):
    """Raised when a request body cannot be parsed into entry fields."""


class LogEntryNotFoundError(LogbookError):
    """Raised when the requested log entry does not exist."""


class StorageError(LogbookError):
    """Raised when the backing database fails to complete an operation."""
