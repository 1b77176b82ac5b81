"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from fieldday.core.config import Settings
from fieldday.infrastructure.database import build_engine, build_session_factory
from fieldday.modules.logbook import MODES
from fieldday.web.rendering import HTMX_CDN_URL, HTMX_FILENAME, FragmentRenderer


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    renderer: FragmentRenderer

    async def dispose(self) -> None:
        await self.engine.dispose()


def _htmx_src(settings: Settings) -> str:
    """Prefer the copy served from /static so the page works offline."""
    if (settings.resolve_path(settings.static_dir) / HTMX_FILENAME).is_file():
        return f"/static/{HTMX_FILENAME}"
    return HTMX_CDN_URL


def build_container(settings: Settings) -> ApplicationContainer:
    """Create the process-lifetime engine, session factory and renderer."""
    engine = build_engine(settings)
    return ApplicationContainer(
        settings=settings,
        engine=engine,
        session_factory=build_session_factory(engine),
        renderer=FragmentRenderer(
            settings.resolve_path(settings.template_dir),
            MODES,
            htmx_src=_htmx_src(settings),
        ),
    )


__all__ = ["ApplicationContainer", "build_container"]
