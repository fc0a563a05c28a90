"""
danaverse-api entry point.

Usage:
    python api/main.py
    uvicorn main:create_app --factory --app-dir api
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from core import errors, logs, middleware
from core.settings import SERVICE_NAME, Settings, env_file_present, get_settings
from projects import router as projects_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("startup service=%s mode=%s", SERVICE_NAME, settings.API_MODE)
        if settings.debug:
            logs.log_routes(app, logger, mounted=[(API_PREFIX, projects_router.router)])
        try:
            yield
        finally:
            logger.info("shutdown service=%s", SERVICE_NAME)

    app = FastAPI(title=SERVICE_NAME, debug=settings.debug, lifespan=lifespan)

    # Allow the web app's dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(middleware.RequestLoggingMiddleware)
    errors.install_error_handlers(app)

    app.include_router(projects_router.router, prefix=API_PREFIX, tags=["projects"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "service": SERVICE_NAME}

    return app


def run() -> None:
    """
    Load settings, then serve until interrupted.

    Bad settings or a port that cannot be bound end the process with status 1.
    """
    try:
        settings = get_settings()
    except ValidationError as exc:
        logs.configure_logging("release")
        logger.error("Failed to start server: invalid settings: %s", exc)
        sys.exit(1)

    logs.configure_logging(settings.API_MODE)
    if not env_file_present():
        logger.info("No .env file found")

    app = create_app(settings)

    logger.info("Server starting on port %s", settings.PORT)
    try:
        uvicorn.run(
            app,
            host=settings.HOST,
            port=settings.PORT,
            log_level="debug" if settings.debug else "info",
            access_log=False,
        )
    except OSError as exc:
        logger.error("Failed to start server: %s", exc)
        sys.exit(1)
    except SystemExit as exc:
        # uvicorn exits on its own when the listener cannot bind.
        if exc.code not in (None, 0):
            logger.error("Failed to start server: exit status %s", exc.code)
            sys.exit(1)
        raise


if __name__ == "__main__":
    run()
