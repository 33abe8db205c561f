"""Error types raised by the todo service layer.

The HTTP layer maps these onto JSON error responses; see
``todo_api.server.exception_handlers``.
"""

from __future__ import annotations


class TodoError(Exception):
    """Base error for all todo domain exceptions."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TodoNotFoundError(TodoError):
    """Raised when a todo does not exist or is not visible (e.g. in the trash)."""

    status_code = 404

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo {todo_id} not found.")
        self.todo_id = todo_id


class TodoValidationError(TodoError):
    """Raised when a request breaks a todo business rule."""

    status_code = 400
