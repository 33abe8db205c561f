"""
Service Dependencies.

Provides request-scoped service instances for API endpoints.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.database import get_session
from todo_api.server.services.todos import TodoService


def get_todo_service(session: AsyncSession = Depends(get_session)) -> TodoService:
    """Build a ``TodoService`` bound to the request's database session."""
    return TodoService(session)


TodoServiceDep = Annotated[TodoService, Depends(get_todo_service)]
