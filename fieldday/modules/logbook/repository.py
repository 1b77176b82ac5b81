"""Repository protocol for persisting log entries."""

from __future__ import annotations

from typing import Protocol

from fieldday.db.models import LogEntry as LogEntryModel


class LogEntryRepository(Protocol):
    async def create(
        self,
        *,
        callsign: str,
        time: str,
        frequency: str,
        mode: str,
        notes: str,
    ) -> LogEntryModel:
        ...

    async def get_by_id(self, entry_id: int) -> LogEntryModel | None:
        ...

    async def list_all(self) -> list[LogEntryModel]:
        ...

    async def update(
        self,
        entry_id: int,
        *,
        callsign: str,
        time: str,
        frequency: str,
        mode: str,
        notes: str,
    ) -> int:
        ...

    async def commit(self) -> None:
        ...
