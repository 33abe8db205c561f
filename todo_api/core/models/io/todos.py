"""
Schema models for todo API requests and responses.

JSON keys are camelCase on the wire (``isCompleted``, ``dueDate``...); request
bodies also accept the snake_case field names.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
MAX_QUERY_LENGTH = 80


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a datetime to UTC; naive values are taken to be UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TodoSort(str, Enum):
    """Supported list orderings. A leading ``-`` means descending."""

    CREATED_AT = "createdAt"
    CREATED_AT_DESC = "-createdAt"
    TITLE = "title"
    TITLE_DESC = "-title"
    ORDER = "order"
    ORDER_DESC = "-order"
    DUE = "due"
    DUE_DESC = "-due"

    @classmethod
    def parse(cls, value: Optional[str]) -> "TodoSort":
        """Map a raw ``sort`` query value onto a sort, newest first by default."""
        try:
            return cls(value)
        except ValueError:
            return cls.CREATED_AT_DESC


class TodoStatus(str, Enum):
    """Completion-state shorthand used by the web client."""

    OPEN = "open"
    DONE = "done"


class TodoCreate(CamelModel):
    """Schema for creating a todo.

    ``title`` is optional at the schema level so that a missing or blank title
    is reported as a business error (400) rather than a schema error.
    """

    title: Optional[str] = Field(default=None, description="Short description of the task")
    notes: Optional[str] = Field(default=None, description="Free-form notes")
    due_date: Optional[datetime] = Field(default=None, description="When the task is due")
    sort_order: Optional[int] = Field(default=None, description="Manual ordering key (defaults to 0)")

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class TodoUpdate(CamelModel):
    """Schema for partially updating a todo.

    Fields left out (or sent as null) are not changed. ``clear_due_date``
    removes the due date and takes precedence over ``due_date``.
    """

    title: Optional[str] = None
    notes: Optional[str] = None
    due_date: Optional[datetime] = None
    sort_order: Optional[int] = None
    is_completed: Optional[bool] = None
    clear_due_date: bool = False

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class TodoRead(CamelModel):
    """Schema for reading a todo."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    title: str
    notes: Optional[str] = None
    is_completed: bool
    sort_order: int
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @field_validator("due_date", "created_at", "updated_at", "deleted_at")
    @classmethod
    def normalize_timestamps(cls, value: Optional[datetime]) -> Optional[datetime]:
        # SQLite hands timestamps back without an offset
        return as_utc(value)


class TodoStats(CamelModel):
    """Counters over the todos that are not in the trash."""

    total: int = 0
    completed: int = 0
    remaining: int = 0
    completion_rate: int = Field(default=0, description="Completed share in whole percent")
    overdue: int = Field(default=0, description="Open todos due before the start of today (UTC)")
    due_soon: int = Field(default=0, description="Open todos due within the next three days")


class TodoListFilters(BaseModel):
    """Normalized list query.

    Construct through :meth:`from_query` to get the clamping and trimming
    rules applied to raw query string values.
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    completed: Optional[bool] = None
    q: Optional[str] = None
    deleted: bool = False
    sort: TodoSort = TodoSort.CREATED_AT_DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @classmethod
    def from_query(
        cls,
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        completed: Optional[bool] = None,
        status: Optional[TodoStatus] = None,
        q: Optional[str] = None,
        deleted: bool = False,
        sort: Optional[str] = None,
    ) -> "TodoListFilters":
        page = page if page >= 1 else 1
        page_size = DEFAULT_PAGE_SIZE if page_size < 1 else min(page_size, MAX_PAGE_SIZE)

        if completed is None and status is not None:
            completed = status == TodoStatus.DONE

        term = (q or "").strip()[:MAX_QUERY_LENGTH].strip()

        return cls(
            page=page,
            page_size=page_size,
            completed=completed,
            q=term or None,
            deleted=deleted,
            sort=TodoSort.parse(sort),
        )
