"""
Repositories for the centralized database layer.

Each repository wraps an ``AsyncSession`` and owns the queries for one table.
"""

from .base import AsyncBaseRepository, QueryBuilder
from .todos import TodoRepository

__all__ = ["AsyncBaseRepository", "QueryBuilder", "TodoRepository"]
