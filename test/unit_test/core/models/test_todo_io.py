"""Unit tests for the todo I/O schemas and list query normalization."""

from datetime import datetime, timedelta, timezone

import pytest

from todo_api.core.models.io.todos import (
    MAX_PAGE_SIZE,
    TodoCreate,
    TodoListFilters,
    TodoRead,
    TodoSort,
    TodoStatus,
    TodoUpdate,
)


class TestTodoListFilters:
    def test_defaults(self):
        filters = TodoListFilters.from_query()
        assert filters.page == 1
        assert filters.page_size == 20
        assert filters.completed is None
        assert filters.q is None
        assert filters.deleted is False
        assert filters.sort is TodoSort.CREATED_AT_DESC
        assert filters.offset == 0

    @pytest.mark.parametrize(
        ("page", "page_size", "expected_page", "expected_size"),
        [
            (0, 0, 1, 20),
            (-3, -1, 1, 20),
            (2, 500, 2, MAX_PAGE_SIZE),
            (3, 10, 3, 10),
        ],
    )
    def test_paging_is_clamped(self, page, page_size, expected_page, expected_size):
        filters = TodoListFilters.from_query(page=page, page_size=page_size)
        assert filters.page == expected_page
        assert filters.page_size == expected_size

    def test_offset(self):
        assert TodoListFilters.from_query(page=3, page_size=10).offset == 20

    def test_search_term_trimmed_and_truncated(self):
        filters = TodoListFilters.from_query(q="   " + "a" * 100 + "  ")
        assert filters.q == "a" * 80

    def test_blank_search_term_dropped(self):
        assert TodoListFilters.from_query(q="    ").q is None

    def test_status_maps_to_completed(self):
        assert TodoListFilters.from_query(status=TodoStatus.DONE).completed is True
        assert TodoListFilters.from_query(status=TodoStatus.OPEN).completed is False
        assert TodoListFilters.from_query(status=TodoStatus.DONE, completed=False).completed is False

    @pytest.mark.parametrize("raw", [None, "", "newest", "CREATEDAT"])
    def test_unknown_sort_falls_back_to_newest(self, raw):
        assert TodoListFilters.from_query(sort=raw).sort is TodoSort.CREATED_AT_DESC

    def test_known_sort(self):
        assert TodoListFilters.from_query(sort="-due").sort is TodoSort.DUE_DESC


class TestSchemas:
    def test_create_accepts_camel_case(self):
        request = TodoCreate.model_validate({"title": "x", "dueDate": "2026-01-02T03:04:05Z", "sortOrder": "4"})
        assert request.sort_order == 4
        assert request.due_date == datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_due_date_converted_to_utc(self):
        request = TodoUpdate.model_validate({"dueDate": "2026-01-02T05:00:00+02:00"})
        assert request.due_date.utcoffset() == timedelta(0)
        assert request.due_date.hour == 3

    def test_naive_due_date_taken_as_utc(self):
        request = TodoCreate(title="x", due_date=datetime(2026, 1, 2, 3, 4))
        assert request.due_date.tzinfo is timezone.utc

    def test_update_defaults(self):
        request = TodoUpdate()
        assert request.clear_due_date is False
        assert request.model_dump(exclude_unset=True) == {}

    def test_read_serializes_camel_case(self):
        created = datetime(2026, 1, 1, 12, 0)
        read = TodoRead(
            id=1,
            title="t",
            is_completed=True,
            sort_order=2,
            created_at=created,
            updated_at=created,
        )
        data = read.model_dump(by_alias=True, mode="json")
        assert set(data) == {
            "id",
            "title",
            "notes",
            "isCompleted",
            "sortOrder",
            "dueDate",
            "createdAt",
            "updatedAt",
            "deletedAt",
        }
        assert read.created_at.tzinfo is timezone.utc
