"""Test configuration for integration tests.

Every test gets its own SQLite database file under ``tmp_path``: tables are
created during setup, dropped and the engine disposed during teardown, so no
state leaks from one scenario to the next.
"""

from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator, Awaitable, Callable, List, Optional

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlmodel import select

from product_console.business.products_manager import ProductsManager
from product_console.core.database.entities.products import Product
from product_console.core.database.repositories.products import ProductRepository
from product_console.core.database.utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)


@pytest.fixture(scope="function")
async def db_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh SQLite database for one test."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'products.db'}")
    await create_all(engine)

    try:
        yield engine
    finally:
        await drop_all(engine)
        await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(db_engine)


@pytest.fixture(scope="function")
async def db_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """Session used by the code under test."""
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def product_repository(db_session: AsyncSession) -> ProductRepository:
    return ProductRepository(db_session)


@pytest.fixture(scope="function")
def products_manager(product_repository: ProductRepository) -> ProductsManager:
    return ProductsManager(product_repository)


@pytest.fixture(scope="function")
def fetch_product(session_factory: async_sessionmaker[AsyncSession]) -> Callable[[str], Awaitable[Optional[Product]]]:
    """Read a product by code through a separate session, bypassing the identity map under test."""

    async def _fetch(product_code: str) -> Optional[Product]:
        async with session_factory() as session:
            result = await session.execute(select(Product).where(Product.product_code == product_code))
            return result.scalar_one_or_none()

    return _fetch


@pytest.fixture(scope="function")
def fetch_all_products(session_factory: async_sessionmaker[AsyncSession]) -> Callable[[], Awaitable[List[Product]]]:
    """Read every stored product through a separate session."""

    async def _fetch_all() -> List[Product]:
        async with session_factory() as session:
            result = await session.execute(select(Product).order_by(Product.id))
            return list(result.scalars().all())

    return _fetch_all
