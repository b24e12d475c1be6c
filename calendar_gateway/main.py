"""
FastAPI application entrypoint for the calendar gateway.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from calendar_gateway.api.routes import router as api_router
from calendar_gateway.core.config import get_settings
from calendar_gateway.core.logging import configure_logging

logger = logging.getLogger(__name__)

DOCS_PATH = "/api-docs"


def create_app() -> FastAPI:
    """Factory for the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info(
            "Server running at http://localhost:%s%s/", settings.port, DOCS_PATH
        )
        yield

    app = FastAPI(
        title="Google Calendar API",
        version="1.0.0",
        description="Google Calendar API Integration",
        docs_url=DOCS_PATH,
        lifespan=lifespan,
    )
    app.include_router(api_router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
