"""
API endpoints for managing todo items.

Provides CRUD operations plus completion, trash (soft delete / restore /
purge) and summary statistics. Responses use camelCase JSON keys; the list
endpoint reports the unpaginated match count in the ``X-Total-Count`` header.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, Response, status

from todo_api.core.logging_config import get_logger
from todo_api.core.models.io.todos import (
    DEFAULT_PAGE_SIZE,
    TodoCreate,
    TodoListFilters,
    TodoRead,
    TodoStats,
    TodoStatus,
    TodoUpdate,
)
from todo_api.server.services.deps import TodoServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["todos"])

TOTAL_COUNT_HEADER = "X-Total-Count"

_ERROR_RESPONSES = {
    400: {"description": "The request breaks a todo rule (e.g. blank title)"},
    404: {"description": "Todo not found"},
}


@router.get(
    "",
    response_model=list[TodoRead],
    summary="List Todos",
    description="List todos with optional completion filter, text search, trash view, sorting and pagination.",
    response_description="One page of todos. The total match count is in the X-Total-Count header.",
)
async def list_todos(
    response: Response,
    service: TodoServiceDep,
    completed: Optional[bool] = Query(default=None, description="Only completed (true) or open (false) todos"),
    status_filter: Optional[TodoStatus] = Query(default=None, alias="status", description="'open' or 'done'"),
    q: Optional[str] = Query(default=None, description="Case-insensitive search in title and notes"),
    deleted: bool = Query(default=False, description="List the trash instead of live todos"),
    page: int = Query(default=1, description="1-based page number"),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, alias="pageSize", description="Items per page (max 100)"),
    sort: Optional[str] = Query(
        default=None,
        description="createdAt, -createdAt, title, -title, order, -order, due, -due (default -createdAt)",
    ),
) -> list[TodoRead]:
    """
    List todos.

    - **completed**: filter by completion state; takes precedence over **status**.
    - **status**: ``open`` or ``done``.
    - **q**: search term, trimmed and cut to 80 characters.
    - **deleted**: when true, only todos in the trash are listed.
    - **page** / **pageSize**: out-of-range values are clamped rather than rejected.
    - **sort**: unknown values fall back to newest first.
    """
    filters = TodoListFilters.from_query(
        page=page,
        page_size=page_size,
        completed=completed,
        status=status_filter,
        q=q,
        deleted=deleted,
        sort=sort,
    )
    items, total = await service.list(filters)
    response.headers[TOTAL_COUNT_HEADER] = str(total)
    return [TodoRead.model_validate(item) for item in items]


@router.get(
    "/stats",
    response_model=TodoStats,
    summary="Todo Statistics",
    description="Counters over todos that are not in the trash: completion and due-date pressure.",
)
async def todo_stats(service: TodoServiceDep) -> TodoStats:
    """Summary counters (total, completed, remaining, completion rate, overdue, due soon)."""
    return await service.stats()


@router.get(
    "/{todo_id}",
    response_model=TodoRead,
    summary="Get Todo",
    responses={404: _ERROR_RESPONSES[404]},
)
async def get_todo(todo_id: int, service: TodoServiceDep) -> TodoRead:
    """Get a single todo. Todos in the trash are reported as not found."""
    return TodoRead.model_validate(await service.get(todo_id))


@router.post(
    "",
    response_model=TodoRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    responses={400: _ERROR_RESPONSES[400]},
)
async def create_todo(request: TodoCreate, response: Response, service: TodoServiceDep) -> TodoRead:
    """
    Create a todo.

    - **title**: required, trimmed, at most 200 characters.
    - **notes**: optional, trimmed, at most 2000 characters.
    - **dueDate**: optional ISO-8601 timestamp.
    - **sortOrder**: optional manual ordering key (default 0).
    """
    todo = await service.create(request)
    response.headers["Location"] = f"/api/todos/{todo.id}"
    return TodoRead.model_validate(todo)


@router.patch(
    "/{todo_id}",
    response_model=TodoRead,
    summary="Update Todo",
    responses=_ERROR_RESPONSES,
)
async def update_todo(todo_id: int, request: TodoUpdate, service: TodoServiceDep) -> TodoRead:
    """
    Partially update a todo.

    Fields that are missing or null keep their value. Send ``clearDueDate: true``
    to remove the due date.
    """
    return TodoRead.model_validate(await service.update(todo_id, request))


@router.post(
    "/{todo_id}/complete",
    response_model=TodoRead,
    summary="Complete Todo",
    responses={404: _ERROR_RESPONSES[404]},
)
async def complete_todo(todo_id: int, service: TodoServiceDep) -> TodoRead:
    """Mark a todo as done."""
    return TodoRead.model_validate(await service.complete(todo_id, True))


@router.post(
    "/{todo_id}/reopen",
    response_model=TodoRead,
    summary="Reopen Todo",
    responses={404: _ERROR_RESPONSES[404]},
)
async def reopen_todo(todo_id: int, service: TodoServiceDep) -> TodoRead:
    """Mark a done todo as open again."""
    return TodoRead.model_validate(await service.complete(todo_id, False))


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Todo",
    description="Move a todo to the trash. It can be brought back with the restore endpoint.",
    responses={404: _ERROR_RESPONSES[404]},
)
async def delete_todo(todo_id: int, service: TodoServiceDep) -> Response:
    """Soft delete a todo."""
    await service.delete(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{todo_id}/restore",
    response_model=TodoRead,
    summary="Restore Todo",
    responses={404: _ERROR_RESPONSES[404]},
)
async def restore_todo(todo_id: int, service: TodoServiceDep) -> TodoRead:
    """Take a todo out of the trash. Restoring a live todo is a no-op."""
    return TodoRead.model_validate(await service.restore(todo_id))


@router.delete(
    "/{todo_id}/purge",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Purge Todo",
    description="Permanently delete a todo that is already in the trash.",
    responses=_ERROR_RESPONSES,
)
async def purge_todo(todo_id: int, service: TodoServiceDep) -> Response:
    """Permanently delete a trashed todo."""
    await service.purge(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
