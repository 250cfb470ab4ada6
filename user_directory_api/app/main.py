"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application, sets up logging,
builds the user store and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn user_directory_api.app.main:app --port 8080

The store lives on ``app.state.store``; handlers reach it through the
``get_store`` dependency, so every application instance (and every
test) works with its own directory.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.user_store import UserNotFoundError, UserStore


logger = logging.getLogger(__name__)


async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> PlainTextResponse:
    return PlainTextResponse("User not found", status_code=404)


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[UserStore]
        Store to serve.  When omitted a new store is created using
        ``settings.id_policy``.  An empty store is seeded with one user
        named ``settings.seed_user_name`` before the app is returned.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = UserStore(id_policy=settings.id_policy)
    if len(store) == 0:
        seed = store.create(settings.seed_user_name)
        logger.info("Seeded user directory with user %s (%s)", seed.id, seed.name)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store

    app.add_exception_handler(UserNotFoundError, user_not_found_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info(
        "%s %s ready (id policy: %s)", settings.project_name, settings.api_version, store.id_policy
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
