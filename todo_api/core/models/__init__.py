"""Core models and schemas shared between the service and the HTTP layer."""
