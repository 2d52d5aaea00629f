"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app
here makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn user_registry_api.app.main:app --reload

The application title, version and documentation path are provided
via ``Settings`` from ``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import UserStore


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Record store the application should serve.  A new, empty store
        is created when omitted, so each call yields an independent
        application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description="Create, list, read, replace and delete users kept in memory.",
        docs_url=settings.docs_url,
    )
    app.state.user_store = store if store is not None else UserStore()

    register_exception_handlers(app)

    # The v1 routes are served at the root (``/users``) to keep the public
    # paths stable; a future version would be mounted under its own prefix.
    app.include_router(v1_router)

    logging.getLogger(__name__).debug("Application created with docs at %s", settings.docs_url)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
