"""
Todo entity models.

This module contains the database entity for todo items. A todo with
``deleted_at`` set sits in the trash: it is hidden from normal reads until
it is restored or purged.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now

TITLE_MAX_LENGTH = 200
NOTES_MAX_LENGTH = 2000


class TodoItemBase(Base):
    """Base fields for a todo item."""

    title: str = Field(max_length=TITLE_MAX_LENGTH, description="Short description of the task")
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH, description="Free-form notes")
    is_completed: bool = Field(default=False, description="Whether the task is done")
    sort_order: int = Field(default=0, description="Manual ordering key")
    due_date: Optional[datetime] = Field(
        default=None,
        sa_type=DateTime(timezone=True),
        description="When the task is due",
    )


class TodoItem(TodoItemBase, table=True):
    """Persistent todo item.

    Table: todos
    """

    __tablename__ = "todos"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    deleted_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True), index=True)

    @property
    def is_deleted(self) -> bool:
        """Whether the todo currently sits in the trash."""
        return self.deleted_at is not None

    def __repr__(self) -> str:
        return f"TodoItem(id={self.id}, title={self.title!r}, completed={self.is_completed})"
