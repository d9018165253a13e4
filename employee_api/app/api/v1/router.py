"""
Top-level router for version 1 of the API.

This router aggregates the domain routers.  Employee routes live under
``/employees``; the plain-text banner is served at ``/``.
"""

from fastapi import APIRouter

from .endpoints import employees, root

router = APIRouter()

router.include_router(root.router, tags=["info"])
router.include_router(employees.router, prefix="/employees", tags=["employees"])
