"""
Top-level package for the Employee Management API.

An in-memory CRUD service for employee records served over HTTP with
FastAPI.  All functionality lives in submodules under ``app``; the
ASGI application is ``employee_api.app.main:app``.
"""

__all__ = []
