"""
Todo domain error handler.

Maps ``TodoError`` subclasses raised by the service layer onto
``{"error": "<message>"}`` responses with the error's status code.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from todo_api.core.errors import TodoError
from todo_api.core.logging_config import get_logger

logger = get_logger(__name__)


async def todo_error_handler(request: Request, exc: TodoError) -> JSONResponse:
    """
    Convert a todo domain error into a JSON error response.

    Args:
        request: The HTTP request that caused the exception
        exc: The domain error that was raised

    Returns:
        JSONResponse with the error message and the error's status code
    """
    logger.info(
        f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
