"""
Global Exception Handler for FastAPI Application.

Unhandled exceptions are logged once with an error id and the request
context (including the todo id when the route has one) and reported to
monitoring. Clients receive a generic 500 body carrying the same error id.
"""

import traceback
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from todo_api.core.errors import TodoError
from todo_api.core.logging_config import get_logger
from todo_api.core.monitoring import log_error

from .todo_handler import todo_error_handler

logger = get_logger(__name__)


def request_context(request: Request) -> Dict[str, Any]:
    """Collect the request attributes worth attaching to an error log."""
    context: Dict[str, Any] = {
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client": request.client.host if request.client else "unknown",
    }
    todo_id = request.path_params.get("todo_id")
    if todo_id is not None:
        context["todo_id"] = todo_id
    return context


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unhandled exception and answer with a 500.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with a generic message, the error id and the error type
    """
    error_id = id(exc)
    error_type = type(exc).__name__
    context = request_context(request)

    target = f"todo {context['todo_id']}" if "todo_id" in context else context["path"]
    logger.error(
        f"Unhandled exception [{error_id}] in {context['method']} {target}: {exc}",
        exc_info=True,
        extra={
            **context,
            "error_id": error_id,
            "error_type": error_type,
            "traceback": traceback.format_exc(),
        },
    )
    log_error(error_type, str(exc), {"error_id": error_id, **context})

    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_id": error_id, "error_type": error_type},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(TodoError, todo_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
