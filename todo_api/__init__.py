"""Todo backend: user authentication and per-user task CRUD over HTTP."""

__version__ = "1.0.0"
