"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from prereg import __version__
from prereg.api.errors import install_exception_handlers
from prereg.api.routes import router
from prereg.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "reservation",
        "description": "Pre-registration - Submit a registration and receive a confirmation email",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Logs the effective email configuration on startup.
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Email backend: %s", settings.email_backend)
    if not settings.admin_email:
        logger.warning("ADMIN_EMAIL is not set; admin notifications are disabled")

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


def create_app() -> FastAPI:
    """Build the application with routes and exception handlers."""
    application = FastAPI(
        title="prereg",
        description="Pre-registration API - Accepts registrations and sends confirmation emails",
        version=__version__,
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    install_exception_handlers(application)
    application.include_router(router, prefix="/api")

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


app = create_app()
