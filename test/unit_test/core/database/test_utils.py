"""Unit tests for the database engine helpers."""

import pytest

from todo_api.core.database.utils import normalize_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgres://todo:pw@db:5432/todos", "postgresql+asyncpg://todo:pw@db:5432/todos"),
        ("postgresql://todo:pw@db:5432/todos", "postgresql+asyncpg://todo:pw@db:5432/todos"),
        ("postgresql+psycopg://todo:pw@db/todos", "postgresql+asyncpg://todo:pw@db/todos"),
        ("postgresql+asyncpg://todo:pw@db/todos", "postgresql+asyncpg://todo:pw@db/todos"),
        ("sqlite:///./todos.db", "sqlite+aiosqlite:///./todos.db"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_normalize_url(url: str, expected: str):
    assert normalize_url(url) == expected
