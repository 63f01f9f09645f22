"""Database initialization utilities."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with Base.metadata
import taskhub.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from taskhub.infrastructure.persistence.sqlalchemy.engine import build_engine
from taskhub.infrastructure.persistence.sqlalchemy.models.base import Base
from taskhub_config.settings import get_settings

logger = logging.getLogger(__name__)


def _get_engine() -> AsyncEngine:
    """Get the database engine for initialization."""
    return build_engine(get_settings().database_url)


def describe_database(database_url: str) -> str:
    """Strip credentials from a database URL for display."""
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    owns_engine = engine is None
    engine = engine or _get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if owns_engine:
        await engine.dispose()
    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    owns_engine = engine is None
    engine = engine or _get_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    if owns_engine:
        await engine.dispose()
    logger.info("Database tables dropped successfully")


async def reset_database(engine: AsyncEngine | None = None) -> None:
    """Drop all tables and recreate them."""
    await drop_tables(engine)
    await create_tables(engine)
    logger.info("Database recreated successfully!")
