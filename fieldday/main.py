import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from fieldday import __version__
from fieldday.core.config import Settings, get_settings
from fieldday.core.container import build_container
from fieldday.infrastructure.database import init_db
from fieldday.interfaces.http.errors import register_exception_handlers
from fieldday.interfaces.http.routers import logbook

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.container
    logger.info("Current working directory: %s", Path.cwd())
    await init_db(container.engine)
    yield
    await container.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.project_name,
        description="Contact logbook for amateur radio field events",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = build_container(settings)

    static_dir = settings.resolve_path(settings.static_dir)
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    register_exception_handlers(app)
    app.include_router(logbook.router)

    return app


app = create_app()
