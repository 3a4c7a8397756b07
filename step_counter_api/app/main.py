"""
Main entrypoint for the Team Step Counter API.

This module assembles the FastAPI application, sets up logging,
creates the team store and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn step_counter_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import InMemoryTeamStore, TeamStore
from .services.team_service import TeamService


def create_app(store: Optional[TeamStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[TeamStore]
        Store to serve teams from.  A fresh ``InMemoryTeamStore`` is
        created when omitted, so every application starts empty.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the rest of the
    # setup can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        servers=[{"url": settings.server_url}],
    )

    if store is None:
        store = InMemoryTeamStore()
    app.state.store = store
    app.state.team_service = TeamService(store)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logging.getLogger(__name__).info(
        "%s %s configured with %s", settings.project_name, settings.api_version, type(store).__name__
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
