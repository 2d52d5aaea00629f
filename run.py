"""Entry point for the User Registry API.

Launches the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example inside a container where
you only specify a single Python file to run.

The listen address comes from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3000``); see
``user_registry_api/app/core/config.py`` for every supported variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_registry_api.app.core.config import settings
from user_registry_api.app.main import app


async def main() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running at http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
