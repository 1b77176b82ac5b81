import pytest
from fastapi.testclient import TestClient

from fieldday.core.config import Settings
from fieldday.infrastructure.database import (
    build_engine,
    build_session_factory,
    init_db,
    session_scope,
)
from fieldday.main import create_app
from fieldday.modules.logbook import LogbookService


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    db_path = tmp_path / "test.sqlite3"
    return Settings(
        environment="test",
        database={"url": f"sqlite+aiosqlite:///{db_path}"},
    )


@pytest.fixture
async def session_factory(settings):
    engine = build_engine(settings)
    await init_db(engine)
    try:
        yield build_session_factory(engine)
    finally:
        await engine.dispose()


@pytest.fixture
async def service(session_factory):
    async with session_scope(session_factory) as session:
        yield LogbookService.with_session(session)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_entry():
    return {
        "callsign": "W1AW",
        "time": "1200Z",
        "frequency": "14.250",
        "mode": "SSB",
        "notes": "test",
    }
