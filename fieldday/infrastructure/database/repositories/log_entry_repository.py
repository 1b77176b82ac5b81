"""SQLAlchemy repository for contact log entries."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fieldday.db.models import LogEntry as LogEntryModel


class SqlLogEntryRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        callsign: str,
        time: str,
        frequency: str,
        mode: str,
        notes: str,
    ) -> LogEntryModel:
        model = LogEntryModel(
            callsign=callsign,
            time=time,
            frequency=frequency,
            mode=mode,
            notes=notes,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return model

    async def get_by_id(self, entry_id: int) -> LogEntryModel | None:
        stmt = select(LogEntryModel).where(LogEntryModel.id == entry_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[LogEntryModel]:
        stmt = select(LogEntryModel).order_by(LogEntryModel.id.desc())
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

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
        """Overwrite every editable column and return the number of rows hit."""
        stmt = (
            update(LogEntryModel)
            .where(LogEntryModel.id == entry_id)
            .values(
                callsign=callsign,
                time=time,
                frequency=frequency,
                mode=mode,
                notes=notes,
            )
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def commit(self) -> None:
        await self._session.commit()
