"""
Main entrypoint for the EvePlanner API.

This module assembles the FastAPI application: logging, the store
handles kept on ``app.state``, CORS and security header middleware,
the ``{"error": ...}`` envelope and the routers under ``/api``.
``create_app`` builds an application for a given ``Settings``; the
module‑level ``app`` uses the environment settings, e.g.::

    uvicorn eveplanner_api.app.main:app --reload
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, resolve_path, settings
from .core.db import Database
from .core.errors import register_exception_handlers
from .core.headers import SecurityHeadersMiddleware
from .core.logging_config import setup_logging
from .services.file_service import FileService
from .services.storage import UploadStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Prepare storage before the first request.

    Creates the upload directory, applies database migrations and,
    unless disabled, removes stored objects that no File record
    references.
    """
    app.state.storage.ensure_root()
    app.state.db.init_db()
    if app.state.settings.reconcile_uploads:
        await FileService(app.state.db, app.state.storage).reconcile()
    logger.info("Database at %s, uploads in %s", app.state.db.path, app.state.storage.root)
    yield


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the application from.  Defaults to the
        module‑level ``settings`` read from the environment.

    Returns
    -------
    FastAPI
        A configured application.  The database schema, the upload
        directory and the orphan cleanup are handled by ``lifespan``.
    """
    app_settings = app_settings or settings
    # Configure logging first so that everything below can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.db = Database(resolve_path(app_settings.database_url))
    app.state.storage = UploadStorage(resolve_path(app_settings.upload_dir))

    # The security headers middleware is added last so it wraps CORS and
    # also covers preflight responses.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    # The static front-end is mounted after the API so it never shadows
    # an API route.
    if app_settings.static_dir:
        static_dir = resolve_path(app_settings.static_dir)
        if os.path.isdir(static_dir):
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning("STATIC_DIR %s does not exist; static files are not served", static_dir)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
