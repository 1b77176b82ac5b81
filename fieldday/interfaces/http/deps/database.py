"""Database session dependency."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fieldday.core.container import ApplicationContainer
from fieldday.infrastructure.database import session_scope

from .container import get_container


async def get_db_session(
    container: ApplicationContainer = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    async with session_scope(container.session_factory) as session:
        yield session


__all__ = ["get_db_session"]
