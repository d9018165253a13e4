"""
Application package initializer.

The service is split into ``core`` (settings, logging, the reader/writer
lock), ``schemas`` (pydantic payload and record models), ``services``
(the employee store and pagination) and ``api`` (versioned FastAPI
routers).  ``main`` wires them together.
"""

from .main import app, create_app  # noqa: F401
