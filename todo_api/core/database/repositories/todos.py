"""
Todo repository implementation.

This module provides data access operations for todo items: CRUD, the
filtered/sorted/paginated list query, trash handling and summary counters.
Built on SQLModel entities with async SQLAlchemy sessions.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from todo_api.core.models.io.todos import TodoListFilters, TodoSort, TodoStats, as_utc

from ..base import utc_now
from ..entities.todos import TodoItem
from .base import AsyncBaseRepository, QueryBuilder

DUE_SOON_DAYS = 3


def _order_by(sort: TodoSort) -> list:
    created_at = col(TodoItem.created_at)
    todo_id = col(TodoItem.id)
    due_date = col(TodoItem.due_date)

    if sort is TodoSort.CREATED_AT:
        return [created_at.asc(), todo_id.asc()]
    if sort is TodoSort.TITLE:
        return [col(TodoItem.title).asc(), todo_id.asc()]
    if sort is TodoSort.TITLE_DESC:
        return [col(TodoItem.title).desc(), todo_id.desc()]
    if sort is TodoSort.ORDER:
        return [col(TodoItem.sort_order).asc(), todo_id.asc()]
    if sort is TodoSort.ORDER_DESC:
        return [col(TodoItem.sort_order).desc(), todo_id.desc()]
    if sort is TodoSort.DUE:
        # undated last, then newest first
        return [due_date.is_(None), due_date.asc(), created_at.desc(), todo_id.desc()]
    if sort is TodoSort.DUE_DESC:
        return [due_date.is_(None), due_date.desc(), created_at.desc(), todo_id.desc()]
    return [created_at.desc(), todo_id.desc()]


def _percent(part: int, whole: int) -> int:
    """Whole percent of ``part`` in ``whole``, halves rounded up."""
    if not whole:
        return 0
    return (part * 200 + whole) // (2 * whole)


class TodoRepository(AsyncBaseRepository[TodoItem]):
    """Repository for todo item data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, TodoItem)

    async def create(self, todo: TodoItem) -> TodoItem:
        """Persist a new todo and return it with its generated id."""
        self.session.add(todo)
        await self.session.commit()
        await self.session.refresh(todo)
        return todo

    async def get_by_id(self, todo_id: int) -> Optional[TodoItem]:
        """Get a todo by id, including todos in the trash."""
        return await self.session.get(TodoItem, todo_id)

    async def update(self, todo: TodoItem) -> TodoItem:
        """Write pending changes of ``todo`` and bump ``updated_at``."""
        todo.updated_at = utc_now()
        self.session.add(todo)
        await self.session.commit()
        await self.session.refresh(todo)
        return todo

    async def delete(self, todo_id: int) -> bool:
        """Permanently delete a todo.

        Returns:
            True if deleted, False if not found
        """
        todo = await self.get_by_id(todo_id)
        if todo is None:
            return False
        await self.session.delete(todo)
        await self.session.commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[TodoItem]:
        """List live todos, newest first, with optional equality filters.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (e.g. ``{"is_completed": True}``)

        Returns:
            List of TodoItem instances
        """
        stmt = select(TodoItem).where(col(TodoItem.deleted_at).is_(None))
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, TodoItem, filters)
        stmt = stmt.order_by(*_order_by(TodoSort.CREATED_AT_DESC))
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def query(self, filters: TodoListFilters) -> Tuple[List[TodoItem], int]:
        """Run the list query described by ``filters``.

        Returns:
            The requested page of todos and the total number of matches
            before pagination.
        """
        conditions = []
        if filters.deleted:
            conditions.append(col(TodoItem.deleted_at).is_not(None))
        else:
            conditions.append(col(TodoItem.deleted_at).is_(None))

        if filters.completed is not None:
            conditions.append(col(TodoItem.is_completed) == filters.completed)

        if filters.q:
            pattern = f"%{QueryBuilder.escape_like(filters.q)}%"
            # title and notes are searched as one text so a term may span both
            haystack = col(TodoItem.title) + " " + func.coalesce(col(TodoItem.notes), "")
            conditions.append(haystack.ilike(pattern, escape="/"))

        total = await self._count(*conditions)

        stmt = select(TodoItem).where(*conditions).order_by(*_order_by(filters.sort))
        stmt = QueryBuilder.apply_pagination(stmt, filters.page_size, filters.offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def soft_delete(self, todo: TodoItem) -> TodoItem:
        """Move a todo to the trash."""
        todo.deleted_at = utc_now()
        return await self.update(todo)

    async def restore(self, todo: TodoItem) -> TodoItem:
        """Take a todo back out of the trash."""
        todo.deleted_at = None
        return await self.update(todo)

    async def stats(self, now: Optional[datetime] = None) -> TodoStats:
        """Compute summary counters over live todos.

        Args:
            now: Reference time, converted to UTC (naive values are taken as UTC);
                defaults to the current time
        """
        now = as_utc(now or utc_now())
        start_of_today = now.replace(hour=0, minute=0, second=0, microsecond=0)
        soon = start_of_today + timedelta(days=DUE_SOON_DAYS)

        live = col(TodoItem.deleted_at).is_(None)
        is_open = col(TodoItem.is_completed).is_(False)
        due_date = col(TodoItem.due_date)

        total = await self._count(live)
        completed = await self._count(live, col(TodoItem.is_completed).is_(True))
        overdue = await self._count(live, is_open, due_date < start_of_today)
        due_soon = await self._count(live, is_open, due_date >= start_of_today, due_date <= soon)

        return TodoStats(
            total=total,
            completed=completed,
            remaining=total - completed,
            completion_rate=_percent(completed, total),
            overdue=overdue,
            due_soon=due_soon,
        )

    async def _count(self, *conditions) -> int:
        stmt = select(func.count()).select_from(TodoItem).where(*conditions)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
