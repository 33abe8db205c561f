"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- todos: Todo item I/O models and list query options
"""

from .todos import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MAX_QUERY_LENGTH,
    TodoCreate,
    TodoListFilters,
    TodoRead,
    TodoSort,
    TodoStats,
    TodoStatus,
    TodoUpdate,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "MAX_QUERY_LENGTH",
    "TodoCreate",
    "TodoListFilters",
    "TodoRead",
    "TodoSort",
    "TodoStats",
    "TodoStatus",
    "TodoUpdate",
]
