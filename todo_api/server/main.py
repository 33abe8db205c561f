"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.core.database import engine, init_db
from todo_api.core.logging_config import get_logger, setup_logging
from todo_api.core.monitoring import initialize_logfire

from .api.v1 import health, todos
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup. A failure is logged and the server keeps
    starting so that ``/health`` stays reachable; ``/health/db`` reports the
    database state.
    """
    try:
        logger.info("Starting up todo-api server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down todo-api server...")
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    todo-api Server API

    Task management for a single user: create, list, filter, search, sort,
    update and complete todo items, move them to the trash and restore them.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
    expose_headers=[todos.TOTAL_COUNT_HEADER, "Location"],
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app=app, engine=engine)

app.include_router(health.router, tags=["health"])
app.include_router(todos.router, prefix=f"{constant.API_PREFIX}/todos")


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run(
        "todo_api.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )
