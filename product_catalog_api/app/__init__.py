"""
Application package initializer.

The package is organised like a small layered service: ``core`` holds
configuration, logging, the error taxonomy, authentication and the
in-memory store; ``schemas`` the pydantic models; ``services`` the
validation, query and product logic; and ``api`` the FastAPI routers.
"""

from .main import app, create_app  # noqa: F401
