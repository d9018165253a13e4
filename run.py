"""Entry point for the Employee Management API.

Serves the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``4000``); see ``employee_api/app/core/config.py`` for the other
settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from employee_api.app.core.config import settings
from employee_api.app.main import app

logger = logging.getLogger("employee_api")


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logger.info("Server starting on port %s", settings.port)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
