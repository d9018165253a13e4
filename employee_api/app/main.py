"""
Main entrypoint for the Employee Management API.

This module assembles the FastAPI application: it sets up logging,
installs the request-logging middleware, creates the employee store and
includes the versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time as
``app``, e.g.::

    uvicorn employee_api.app.main:app --port 4000
"""

import logging
from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.employee_service import EmployeeStore

logger = logging.getLogger("employee_api")


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log the method and URI of every request before dispatching it."""
    uri = request.url.path
    if request.url.query:
        uri = f"{uri}?{request.url.query}"
    logger.info("Request: %s %s", request.method, uri)
    return await call_next(request)


def create_app(store: Optional[EmployeeStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[EmployeeStore]
        Store the handlers operate on.  A fresh, empty store is created
        when omitted; tests pass their own to inspect it directly.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else EmployeeStore()

    app.middleware("http")(log_requests)
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
