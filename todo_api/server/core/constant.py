"""Static values shared by the FastAPI application."""

PROJECT_NAME = "todo-api"

API_PREFIX = "/api"

API_VERSION = "1.0.0"

SCHEMA_VERSION = "v1"
