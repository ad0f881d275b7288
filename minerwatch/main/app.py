"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, and includes
the API routers. The poll scheduler runs inside the app lifespan.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from minerwatch.main.config import get_settings
from minerwatch.main.container import app_lifespan, init_container
from minerwatch.presentation.controllers import chart_router
from minerwatch.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first - before configuration is loaded
configure_logging()

settings = get_settings()
update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start polling on startup and stop it on shutdown."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.service.title,
        description=settings.service.description,
        version=settings.service.version,
        debug=settings.service.debug,
        lifespan=lifespan,
    )

    # The chart front-end is served from the device or a file:// page
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(chart_router)

    return app


app = create_app()
