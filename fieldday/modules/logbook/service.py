"""Domain service for contact log entries."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict, dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fieldday.db.models import LogEntry as LogEntryModel
from fieldday.infrastructure.database.repositories.log_entry_repository import (
    SqlLogEntryRepository,
)

from .exceptions import LogEntryNotFoundError, StorageError
from .models import LogEntry, LogEntryInput
from .repository import LogEntryRepository

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(f"Failed to {action}: {exc}") from exc


@dataclass(slots=True)
class LogbookService:
    repository: LogEntryRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "LogbookService":
        return cls(SqlLogEntryRepository(session))

    async def create_entry(self, payload: LogEntryInput) -> int:
        """Store and commit a new entry exactly as given; return its id."""
        with _storage_errors("insert log entry"):
            model = await self.repository.create(**asdict(payload))
            await self.repository.commit()
        logger.info("Logged contact %r as entry %s", payload.callsign, model.id)
        return int(model.id)

    async def get_entry(self, entry_id: int) -> LogEntry:
        with _storage_errors(f"load log entry {entry_id}"):
            model = await self.repository.get_by_id(entry_id)
        if model is None:
            raise LogEntryNotFoundError(f"Log entry not found: {entry_id}")
        return self._to_domain(model)

    async def list_entries(self) -> list[LogEntry]:
        """Return every entry, newest first."""
        with _storage_errors("list log entries"):
            models = await self.repository.list_all()
        return [self._to_domain(model) for model in models]

    async def update_entry(self, entry_id: int, payload: LogEntryInput) -> None:
        """Overwrite and commit all five fields; an unknown id is a silent no-op."""
        with _storage_errors(f"update log entry {entry_id}"):
            affected = await self.repository.update(entry_id, **asdict(payload))
            await self.repository.commit()
        if affected:
            logger.info("Updated entry %s", entry_id)
        else:
            logger.debug("Update matched no entry with id %s", entry_id)

    @staticmethod
    def _to_domain(model: LogEntryModel) -> LogEntry:
        return LogEntry.from_orm(model)
