"""
Todo service.

Applies the business rules for todo items (title/notes normalization,
partial updates, trash semantics) on top of ``TodoRepository`` and raises
``TodoError`` subclasses that the HTTP layer maps to error responses.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.database.entities.todos import NOTES_MAX_LENGTH, TITLE_MAX_LENGTH, TodoItem
from todo_api.core.database.repositories.todos import TodoRepository
from todo_api.core.errors import TodoNotFoundError, TodoValidationError
from todo_api.core.models.io.todos import TodoCreate, TodoListFilters, TodoStats, TodoUpdate
from todo_api.core.monitoring import log_todo_event

logger = logging.getLogger(__name__)


def _clean_title(title: Optional[str]) -> str:
    title = (title or "").strip()
    if not title:
        raise TodoValidationError("Title is required.")
    if len(title) > TITLE_MAX_LENGTH:
        raise TodoValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters.")
    return title


def _clean_notes(notes: Optional[str]) -> Optional[str]:
    if notes is None:
        return None
    notes = notes.strip()
    if len(notes) > NOTES_MAX_LENGTH:
        raise TodoValidationError(f"Notes must be at most {NOTES_MAX_LENGTH} characters.")
    return notes


class TodoService:
    """Service for managing a single user's todo items."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = TodoRepository(session)

    async def create(self, request: TodoCreate) -> TodoItem:
        """Create a todo. Title is required; new todos start open."""
        todo = TodoItem(
            title=_clean_title(request.title),
            notes=_clean_notes(request.notes),
            due_date=request.due_date,
            sort_order=request.sort_order if request.sort_order is not None else 0,
            is_completed=False,
        )
        todo.updated_at = todo.created_at
        todo = await self.repo.create(todo)
        logger.info(f"Created todo {todo.id}")
        log_todo_event("created", todo.id)
        return todo

    async def get(self, todo_id: int) -> TodoItem:
        """Get a live todo.

        Raises:
            TodoNotFoundError: if the todo does not exist or is in the trash
        """
        todo = await self.repo.get_by_id(todo_id)
        if todo is None or todo.is_deleted:
            raise TodoNotFoundError(todo_id)
        return todo

    async def list(self, filters: TodoListFilters) -> Tuple[List[TodoItem], int]:
        """Return one page of todos and the total number of matches."""
        items, total = await self.repo.query(filters)
        logger.debug(
            f"Listed {len(items)} of {total} todos (page={filters.page}, page_size={filters.page_size}, "
            f"completed={filters.completed}, q={filters.q!r}, deleted={filters.deleted}, sort={filters.sort.value})"
        )
        return items, total

    async def update(self, todo_id: int, request: TodoUpdate) -> TodoItem:
        """Apply a partial update; null or missing fields are left unchanged."""
        todo = await self.get(todo_id)

        if request.title is not None:
            todo.title = _clean_title(request.title)

        if request.notes is not None:
            todo.notes = _clean_notes(request.notes)

        if request.clear_due_date:
            todo.due_date = None
        elif request.due_date is not None:
            todo.due_date = request.due_date

        if request.sort_order is not None:
            todo.sort_order = request.sort_order

        if request.is_completed is not None:
            todo.is_completed = request.is_completed

        todo = await self.repo.update(todo)
        log_todo_event("updated", todo.id, fields=sorted(request.model_dump(exclude_unset=True)))
        return todo

    async def complete(self, todo_id: int, completed: bool = True) -> TodoItem:
        """Mark a todo done, or open again with ``completed=False``."""
        return await self.update(todo_id, TodoUpdate(is_completed=completed))

    async def delete(self, todo_id: int) -> TodoItem:
        """Move a live todo to the trash."""
        todo = await self.get(todo_id)
        todo = await self.repo.soft_delete(todo)
        logger.info(f"Moved todo {todo_id} to the trash")
        log_todo_event("deleted", todo_id)
        return todo

    async def restore(self, todo_id: int) -> TodoItem:
        """Take a todo out of the trash. Restoring a live todo returns it unchanged."""
        todo = await self.repo.get_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        if not todo.is_deleted:
            return todo
        todo = await self.repo.restore(todo)
        logger.info(f"Restored todo {todo_id}")
        log_todo_event("restored", todo_id)
        return todo

    async def purge(self, todo_id: int) -> None:
        """Permanently remove a todo that is already in the trash."""
        todo = await self.repo.get_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        if not todo.is_deleted:
            raise TodoValidationError("Only todos in the trash can be purged.")
        await self.repo.delete(todo_id)
        logger.info(f"Purged todo {todo_id}")
        log_todo_event("purged", todo_id)

    async def stats(self) -> TodoStats:
        """Summary counters over live todos."""
        return await self.repo.stats()
