"""todo-api.

A small task management service for a single user. Todo items can be
created, listed, filtered, searched, sorted, updated, completed, moved to the
trash and restored again through a JSON REST API.

Package layout
--------------

- ``todo_api.core``:

  - Logging and Logfire monitoring configuration.
  - Domain errors raised by the service layer.
  - The database layer (SQLModel entities, async repositories, session
    management) and the I/O schemas that define the REST contract.

- ``todo_api.server``:

  - The FastAPI application, its routers, middleware, exception handlers
    and the ``TodoService`` business layer.

Running the server
------------------

``todo-api`` (or ``python -m todo_api.server``) starts uvicorn with the host
and port taken from ``TODO_API_SERVER_HOST`` / ``TODO_API_SERVER_PORT``.
Tables are created on startup when missing; managed deployments should run
the Alembic migrations under ``alembic/`` instead.
"""

__version__ = "1.0.0"
