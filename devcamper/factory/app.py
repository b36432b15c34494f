"""
FastAPI application factory module.

This module builds the DevCamper application: settings, logging, error
handling, database lifecycle and routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from devcamper.api.routes import api_router
from devcamper.config import BaseAppSettings, get_settings
from devcamper.db import init_db, shutdown_db
from devcamper.errors import setup_errors
from devcamper.logging import ensure_logger


def configure_app(app: FastAPI, settings: Optional[BaseAppSettings] = None) -> None:
    """
    Configure a FastAPI application with error handling and routes.

    Args:
        app: The FastAPI application to configure
        settings: Optional application settings, if not provided will be loaded
                 from environment
    """
    app_settings = settings or get_settings()
    logger = ensure_logger(None, "devcamper", app_settings)

    app.state.settings = app_settings
    app.debug = app_settings.DEBUG

    setup_errors(app, app_settings, logger)
    app.include_router(api_router)


def create_app(settings: Optional[BaseAppSettings] = None) -> FastAPI:
    """
    Create the DevCamper FastAPI application.

    The database engine is created on startup and disposed on shutdown.

    Args:
        settings: Optional application settings, loaded from the environment
                  when omitted

    Returns:
        Configured FastAPI application
    """
    app_settings = settings or get_settings()
    logger = ensure_logger(None, "devcamper", app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db(app_settings, logger)
        logger.info(f"{app_settings.APP_NAME} started (debug={app_settings.DEBUG})")
        yield
        await shutdown_db(logger)
        logger.info(f"{app_settings.APP_NAME} stopped")

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.VERSION,
        lifespan=lifespan,
    )
    configure_app(app, app_settings)
    return app
