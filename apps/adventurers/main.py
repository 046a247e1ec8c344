"""Adventurers API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.adventurers.presentation.http.controllers import adventurers_router, health_router
from apps.adventurers.presentation.http.errors import register_exception_handlers
from apps.adventurers.setup.config import get_settings
from apps.adventurers.setup.database import create_schema, dispose_engine
from apps.adventurers.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle."""
    setup_logging(settings)
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    if settings.schema_auto_create:
        await create_schema()

    yield

    logger.info(f"Shutting down {settings.app_name}")
    await dispose_engine()


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.service_version,
        description="Guild adventurer registry with quest progression",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"],
        allow_headers=["*"],
        max_age=settings.cors_max_age,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(adventurers_router)

    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(
        "apps.adventurers.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "local",
    )
