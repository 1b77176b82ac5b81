from pathlib import Path

from fieldday.core.config import PROJECT_ROOT, Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.database_url == "sqlite+aiosqlite:///./fieldday.db"
    assert settings.template_dir.name == "templates"


def test_nested_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE__URL", "sqlite+aiosqlite:////tmp/other.db")
    monkeypatch.setenv("SERVER__PORT", "9000")

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite+aiosqlite:////tmp/other.db"
    assert settings.port == 9000


def test_resolve_path():
    settings = Settings(_env_file=None)

    assert settings.resolve_path(Path("/srv/static")) == Path("/srv/static")
    assert settings.resolve_path(Path("static")) == (PROJECT_ROOT / "static").resolve()


def test_configure_logging_sets_root_level():
    import logging

    from fieldday.core.logging import configure_logging

    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
