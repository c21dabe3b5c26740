"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
built from the application settings.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from product_console.core.config import settings
from product_console.core.logging_config import get_logger

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

# Create global engine and session factory
engine = create_engine(settings.database_url, echo=settings.database_echo)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """Create the product tables on the configured database if they are missing."""
    await create_all(engine)
    logger.info(f"Database initialized at {engine.url.render_as_string(hide_password=True)}")
