"""
Main entrypoint for the Contacts API.

This module assembles the FastAPI application, sets up logging,
registers the contact endpoints and installs the error handlers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn contacts_api.app.main:app --reload

or use ``run.py`` at the repository root.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.endpoints import health
from .api.router import register_endpoints
from .core.config import Settings, settings
from .core.db import StorageError, init_db
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Storage is in-memory, so every start begins with an empty store.
    init_db()
    logger.info("Starting %s in %s mode", app.title, app.state.settings.environment)
    yield
    logger.info("Shutting down %s", app.title)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module-level
        ``settings`` read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    # Interactive docs are a development aid only.
    docs_enabled = not app_settings.is_production
    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
        logger.exception("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    register_endpoints(app)
    app.include_router(health.router, tags=["health"])

    @app.get("/", tags=["root"])
    async def root() -> Dict[str, Any]:
        """Return basic API information."""
        return {
            "name": app_settings.project_name,
            "version": app_settings.api_version,
            "docs": app.docs_url,
            "health": "/health",
        }

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
