"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version, database)
used for monitoring and deployment verification.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.database import get_session
from todo_api.core.logging_config import get_logger
from todo_api.server.core import constant

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    """
    return {"status": "ok"}


@router.get(
    "/health/db",
    summary="Database Health Check",
    description="Check that the database answers a trivial query.",
    responses={503: {"description": "Database unreachable"}},
)
async def database_health_check(session: AsyncSession = Depends(get_session)):
    """
    Database health check endpoint.

    Runs ``SELECT 1`` against the configured database.
    """
    try:
        await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database health check failed: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "error_type": type(e).__name__},
        )
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    """
    Get API version.

    Returns the current semantic version of the API and supported schema version.
    """
    return {"version": constant.API_VERSION, "schema_version": constant.SCHEMA_VERSION}
