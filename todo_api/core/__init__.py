"""
Core utilities and configuration for todo-api.

This package provides core functionality including logging configuration,
monitoring, domain errors, database setup, and other shared utilities.
"""

from todo_api.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
