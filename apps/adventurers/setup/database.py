"""Database Setup."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from apps.adventurers.infrastructure.persistence_postgres import metadata
from apps.adventurers.setup.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# SQLAlchemy Engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

# Session Factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def create_schema(bind: AsyncEngine = engine) -> None:
    """Create missing tables."""
    async with bind.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database schema ensured", extra={"tables": sorted(metadata.tables)})


async def dispose_engine(bind: AsyncEngine = engine) -> None:
    """Close pooled connections."""
    await bind.dispose()
