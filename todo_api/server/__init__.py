"""
todo-api Server Package.

This package contains the web server implementation for todo-api.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration settings and constants.
    services: Business logic used by the routers.
    exception_handlers: Mapping of errors onto HTTP responses.
    middleware: Request timing and monitoring.
"""
