"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds the prefixed server variables and
the ``__``-delimited grouped variables, and that the documented defaults hold.
"""

from pathlib import Path

import pytest

from todo_api.server.core.config import CORSConfig, DatabaseConfig, LogfireConfig, Settings


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parent.parent.parent.parent.parent / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_example_lists_every_setting(self, env_example_vars: dict[str, str]):
        for key in (
            "TODO_API_SERVER_HOST",
            "TODO_API_SERVER_PORT",
            "TODO_API_LOG_LEVEL",
            "DATABASE__URL",
            "CORS__ORIGINS",
            "LOGFIRE__ENABLED",
        ):
            assert key in env_example_vars

    def test_server_port_binding(self, env_example_vars: dict[str, str], monkeypatch):
        port = env_example_vars.get("TODO_API_SERVER_PORT", "8000")
        monkeypatch.setenv("TODO_API_SERVER_PORT", port)

        settings = Settings()
        assert settings.server_port == int(port)

    def test_log_level_binding(self, monkeypatch):
        monkeypatch.setenv("TODO_API_LOG_LEVEL", "DEBUG")

        settings = Settings()
        assert settings.log_level == "DEBUG"

    def test_database_binding(self, monkeypatch):
        monkeypatch.setenv("DATABASE__URL", "sqlite+aiosqlite:///./todos.db")
        monkeypatch.setenv("DATABASE__ECHO", "true")

        settings = Settings()
        assert settings.database.url == "sqlite+aiosqlite:///./todos.db"
        assert settings.database.echo is True

    def test_cors_origins_binding(self, monkeypatch):
        monkeypatch.setenv("CORS__ORIGINS", '["http://localhost:5173", "https://todo.example.com"]')

        settings = Settings()
        assert settings.cors.origins == ["http://localhost:5173", "https://todo.example.com"]

    def test_logfire_binding(self, monkeypatch):
        monkeypatch.setenv("LOGFIRE__ENABLED", "true")
        monkeypatch.setenv("LOGFIRE__TOKEN", "secret-token")
        monkeypatch.setenv("LOGFIRE__ENVIRONMENT", "production")

        settings = Settings()
        assert settings.logfire.enabled is True
        assert settings.logfire.token.get_secret_value() == "secret-token"
        assert settings.logfire.environment == "production"
        assert "secret-token" not in repr(settings.logfire)


class TestConfigDefaults:
    def test_database_defaults(self):
        config = DatabaseConfig()
        assert config.url.startswith("postgresql+asyncpg://")
        assert config.echo is False

    def test_cors_defaults(self):
        config = CORSConfig()
        assert config.origins == ["*"]
        assert config.allow_credentials is True

    def test_logfire_defaults(self):
        config = LogfireConfig()
        assert config.enabled is False
        assert config.token is None
        assert config.service_name == "todo-api"
