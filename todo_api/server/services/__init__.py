"""Business services used by the API routers."""

from .todos import TodoService

__all__ = ["TodoService"]
