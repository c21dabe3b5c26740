"""
Product repository implementation.

This module provides data access operations for the product catalog:
inserts, lookups by primary key or product code, filtered listing,
update-in-place and deletion. No validation happens here; callers are
expected to hand over products that are already known to be valid.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from product_console.core.logging_config import get_logger

from ..entities.products import Product
from .base import AsyncBaseRepository

logger = get_logger(__name__)


class ProductRepository(AsyncBaseRepository[Product]):
    """Repository for product data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Product)

    async def create(self, product: Product) -> Product:
        created = await super().create(product)
        logger.debug(f"Inserted product {created.product_code} with id {created.id}")
        return created

    async def get_by_code(self, product_code: str) -> Optional[Product]:
        """Get a product by its unique product code.

        Pending edits of tracked products are not flushed by the lookup.

        Args:
            product_code: Business key of the product

        Returns:
            Product instance or None
        """
        stmt = select(Product).where(Product.product_code == product_code)
        with self.session.no_autoflush:
            result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_origin_country(self, origin_country: Optional[str]) -> List[Product]:
        """Get all products whose origin country equals ``origin_country`` exactly.

        ``None`` matches nothing, since every stored product has a country.
        """
        stmt = select(Product).where(Product.origin_country == origin_country).order_by(Product.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, product: Product) -> Optional[Product]:
        """Update the stored product matching ``product``.

        The stored record is located by primary key when ``product.id`` is set,
        otherwise (or when no row has that id) by product code. Field values of
        ``product`` are copied onto the stored record unless both are the same
        session-tracked instance.

        Args:
            product: Product carrying the new field values

        Returns:
            Updated Product, or None when no stored record matches

        Raises:
            IntegrityError: If a constraint rejects the new values. The session
                is rolled back and the stored record reloaded first.
        """
        existing: Optional[Product] = None
        if product.id is not None:
            existing = await self.get_by_id(product.id)
        if existing is None:
            existing = await self.get_by_code(product.product_code)
        if existing is None:
            logger.debug(f"No stored product matches id={product.id} code={product.product_code}")
            return None

        if existing is not product:
            existing.sqlmodel_update(product.model_dump(exclude={"id"}))

        self.session.add(existing)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            await self.session.refresh(existing)
            raise
        await self.session.refresh(existing)
        logger.debug(f"Updated product {existing.product_code} with id {existing.id}")
        return existing

    async def discard(self, product: Product) -> None:
        """Drop unsaved edits made to a product tracked by this session.

        The product is reloaded from storage. Products the session does not
        track are left untouched.
        """
        if product in self.session and inspect(product).persistent:
            self.session.expire(product)
            await self.session.refresh(product)
            logger.debug(f"Discarded unsaved changes to product {product.product_code}")

    async def delete_by_code(self, product_code: str) -> bool:
        """Delete the product with the given product code.

        Args:
            product_code: Business key of the product to delete

        Returns:
            True if deleted, False if not found
        """
        product = await self.get_by_code(product_code)
        if product is None:
            return False
        await self.session.delete(product)
        await self.session.commit()
        logger.debug(f"Deleted product {product_code}")
        return True
