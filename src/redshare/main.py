# src/redshare/main.py
"""Main entry point for the RedShare application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from redshare.api import api_router
from redshare.core.errors import RedShareError
from redshare.core.settings import Settings, settings as default_settings
from redshare.db.session import Store
from redshare.services.seed import seed_demo_data

logger = logging.getLogger(__name__)


async def redshare_error_handler(request: Request, exc: RedShareError) -> JSONResponse:
    """Translate a domain error into its status code and ``{"detail": ...}``."""
    if exc.status_code >= 500:
        logger.error("Domain error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(settings: Settings | None = None, store: Store | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Configuration; the module-level ``settings`` by default.
        store: An existing store to serve from. When omitted, one is created
            from ``settings`` at startup and disposed at shutdown.

    Returns:
        The configured application.
    """
    cfg = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_store = store is None
        active = store or Store.from_settings(cfg)
        active.create_tables()
        if cfg.seed_demo_data:
            with active.session() as db:
                seed_demo_data(db)
        app.state.store = active
        logger.info("%s %s started (database: %s)", cfg.app_name, cfg.app_version, active.engine.url)
        try:
            yield
        finally:
            if owns_store:
                active.dispose()

    app = FastAPI(
        title="RedShare API",
        description="Content sharing and social graph API",
        version=cfg.app_version,
        debug=cfg.debug,
        lifespan=lifespan,
    )
    app.state.settings = cfg
    if store is not None:
        app.state.store = store

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=cfg.cors_allow_credentials,
        allow_methods=cfg.cors_allow_methods,
        allow_headers=cfg.cors_allow_headers,
    )
    # Add GZip middleware for compression
    app.add_middleware(GZipMiddleware)

    app.add_exception_handler(RedShareError, redshare_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": "RedShare API",
            "version": cfg.app_version,
            "description": "Content sharing and social graph API",
            "docs": "/docs",
            "redoc": "/redoc",
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("redshare.main:app", host="0.0.0.0", port=8000, reload=default_settings.debug)
