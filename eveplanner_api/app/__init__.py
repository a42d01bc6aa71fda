"""
Application package initializer.

The service is split into ``core`` (configuration, database access,
logging and response policy), ``schemas`` (pydantic payloads),
``services`` (queries and filesystem work for users, events and
uploaded files) and ``api`` (FastAPI routers mounted under ``/api``).
"""

from .main import app, create_app  # noqa: F401
