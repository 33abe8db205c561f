"""
Unit tests for FastAPI application lifespan management.

Tests verify that startup creates the schema, that a database failure does
not stop the server from starting, and that shutdown disposes the engine.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from sqlalchemy import inspect

from todo_api.core.database import create_engine
from todo_api.server.main import lifespan

pytestmark = pytest.mark.asyncio


class TestLifespanStartup:
    """Test application startup lifespan events."""

    async def test_lifespan_startup_initializes_database(self):
        app = FastAPI()

        with (
            patch("todo_api.server.main.init_db", new_callable=AsyncMock) as mock_init_db,
            patch("todo_api.server.main.engine") as mock_engine,
            patch("todo_api.server.main.logger") as mock_logger,
        ):
            mock_engine.dispose = AsyncMock()

            async with lifespan(app):
                mock_init_db.assert_awaited_once()

            mock_engine.dispose.assert_awaited_once()

        messages = [call[0][0] for call in mock_logger.info.call_args_list]
        assert "Database initialized successfully" in messages
        assert "Shutting down todo-api server..." in messages

    async def test_lifespan_startup_survives_database_failure(self):
        app = FastAPI()

        with (
            patch(
                "todo_api.server.main.init_db",
                new_callable=AsyncMock,
                side_effect=ConnectionRefusedError("db down"),
            ),
            patch("todo_api.server.main.engine") as mock_engine,
            patch("todo_api.server.main.logger") as mock_logger,
        ):
            mock_engine.dispose = AsyncMock()

            async with lifespan(app):
                pass

        mock_logger.error.assert_called_once()
        assert "Database initialization failed" in mock_logger.error.call_args[0][0]
        mock_engine.dispose.assert_awaited_once()


class TestInitDb:
    async def test_init_db_creates_todos_table(self):
        from todo_api.core.database.session import init_db

        engine = create_engine("sqlite+aiosqlite:///:memory:")
        try:
            with patch("todo_api.core.database.session.engine", engine):
                await init_db()
                # running twice leaves the existing table alone
                await init_db()

            async with engine.connect() as conn:
                tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
            assert "todos" in tables
        finally:
            await engine.dispose()
