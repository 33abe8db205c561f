"""
Middleware modules for the todo-api server.

This package contains custom middleware for request timing and monitoring.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
