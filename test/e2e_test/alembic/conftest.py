"""Fixtures for Alembic migration tests."""

from pathlib import Path

import pytest
from alembic.config import Config

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@pytest.fixture
def database_url(tmp_path: Path, monkeypatch) -> str:
    """Point the application settings at a throwaway SQLite file."""
    from todo_api.server.core.config import settings

    url = f"sqlite+aiosqlite:///{tmp_path / 'migration.db'}"
    monkeypatch.setattr(settings.database, "url", url)
    return url


@pytest.fixture
def alembic_config(database_url: str) -> Config:
    """Alembic config using the project's migration scripts.

    Built without ``alembic.ini`` so the migration run does not reconfigure
    the test process's logging.
    """
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    return config
