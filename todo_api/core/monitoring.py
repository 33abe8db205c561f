"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for monitoring
and tracing of the todo service, including:
- API endpoint tracing
- Database operation monitoring
- Structured events for todo lifecycle changes

Logfire stays dormant unless ``LOGFIRE__ENABLED`` is true and a token is
configured; the ``log_*`` helpers are no-ops in that case.
"""

import logging
from typing import Any, Optional

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from todo_api.server.core.config import LogfireConfig, settings

logger = logging.getLogger(__name__)

_logfire_active = False


def is_logfire_active() -> bool:
    """Return whether Logfire has been configured for this process."""
    return _logfire_active


def initialize_logfire(
    app: Optional[FastAPI] = None,
    engine: Optional[AsyncEngine] = None,
    config: Optional[LogfireConfig] = None,
) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Args:
        app: FastAPI application to instrument (optional).
        engine: Async SQLAlchemy engine to instrument (optional).
        config: Logfire settings; defaults to ``settings.logfire``.

    Returns:
        True when Logfire was configured, False when it stays disabled.
    """
    global _logfire_active

    config = config or settings.logfire

    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE__ENABLED=true to enable.")
        return False

    if config.token is None or not config.token.get_secret_value():
        logger.warning(
            "Logfire is enabled but LOGFIRE__TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE__TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=config.token.get_secret_value(),
            service_name=config.service_name,
            service_version=config.service_version,
            environment=config.environment,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    _logfire_active = True

    if engine is not None:
        try:
            logfire.instrument_sqlalchemy(engine=engine.sync_engine)
            logger.info("Logfire: SQLAlchemy instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument SQLAlchemy: {e}")

    if app is not None:
        try:
            logfire.instrument_fastapi(app=app)
            logger.info("Logfire: FastAPI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument FastAPI: {e}")
    else:
        logger.debug("FastAPI app instance not provided, skipping FastAPI instrumentation")

    logger.info(
        f"Logfire monitoring initialized: "
        f"environment={config.environment}, "
        f"service={config.service_name}"
    )
    return True


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if not _logfire_active:
        return
    logfire.info(
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_todo_event(action: str, todo_id: Optional[int], **attributes: Any) -> None:
    """
    Log a todo lifecycle change (created, updated, deleted, restored, purged).

    Args:
        action: Short action name
        todo_id: Identifier of the affected todo
        **attributes: Additional structured attributes
    """
    logger.debug(f"Todo {action}: id={todo_id} {attributes}")
    if not _logfire_active:
        return
    logfire.info("Todo {action}", action=action, todo_id=todo_id, **attributes)


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    if not _logfire_active:
        return
    logfire.error(
        "{error_type}: {error_message}",
        error_type=error_type,
        error_message=error_message,
        **(context or {}),
    )
