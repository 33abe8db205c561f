"""
Database entities.

Importing this package registers every table model with ``Base.metadata``.
"""

from .todos import TodoItem, TodoItemBase

__all__ = ["TodoItem", "TodoItemBase"]
