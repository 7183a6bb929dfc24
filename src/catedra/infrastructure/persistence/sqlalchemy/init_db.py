"""Database initialization utilities."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from catedra.infrastructure.persistence.sqlalchemy.models import Base
from catedra_config.settings import get_settings

logger = logging.getLogger(__name__)


def create_engine_from_settings() -> AsyncEngine:
    """Create the async engine, sizing the pool from DB_CONNECTION_LIMIT."""
    settings = get_settings()
    engine_kwargs = {"echo": False, "pool_pre_ping": True}
    if settings.database_backend != "sqlite":
        engine_kwargs["pool_size"] = settings.db_connection_limit
        engine_kwargs["max_overflow"] = 0
    return create_async_engine(settings.database_url, **engine_kwargs)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")
