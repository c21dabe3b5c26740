"""
Products manager.

The manager is the business facade over the product repository: it rejects
malformed input before anything is written, turns empty query results into
``NotFoundError`` and otherwise delegates to the repository.
"""

from __future__ import annotations

from typing import List, Optional

import pydantic
from sqlalchemy.exc import IntegrityError

from product_console.core.database.entities.products import Product
from product_console.core.database.repositories.products import ProductRepository
from product_console.core.database.schemas.products import validate_product
from product_console.core.logging_config import get_logger

from .errors import (
    EMPTY_PRODUCT_CODE_MESSAGE,
    INVALID_PRODUCT_MESSAGE,
    INVALID_UPDATED_PRODUCT_MESSAGE,
    NO_PRODUCT_FOR_ORIGIN_COUNTRY_MESSAGE,
    NO_PRODUCT_FOUND_MESSAGE,
    ArgumentError,
    DuplicateProductCodeError,
    DuplicateProductIdError,
    NotFoundError,
    ProductCodeNotFoundError,
    ProductConflictError,
    ProductsError,
    ValidationError,
)

logger = get_logger(__name__)


class ProductsManager:
    """Validation and orchestration facade for catalog products."""

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    async def add(self, product: Product) -> Product:
        """
        Validate a product and store it.

        Args:
            product: The product to add

        Returns:
            The stored product with its id populated

        Raises:
            ValidationError: If any field is invalid
            DuplicateProductCodeError: If the product code is already taken
            DuplicateProductIdError: If the explicit id is already taken
            ProductConflictError: If storage rejects the product anyway
        """
        product_code = product.product_code
        try:
            self._validate(product, INVALID_PRODUCT_MESSAGE)

            if await self.repository.get_by_code(product_code) is not None:
                logger.warning(f"Rejected product {product_code}: product code already exists")
                raise DuplicateProductCodeError(product_code)

            if product.id is not None and await self.repository.get_by_id(product.id) is not None:
                logger.warning(f"Rejected product {product_code}: id {product.id} already exists")
                raise DuplicateProductIdError(product.id)
        except ProductsError:
            await self.repository.discard(product)
            raise

        try:
            created = await self.repository.create(product)
        except IntegrityError as exc:
            logger.warning(f"Storage rejected product {product_code}: {exc.orig}")
            raise ProductConflictError(product_code) from exc
        logger.info(f"Added product {created.product_code} with id {created.id}")
        return created

    async def delete(self, product_code: Optional[str]) -> None:
        """
        Delete the product with the given code.

        Deleting a code that is not stored is a no-op.

        Raises:
            ArgumentError: If the code is None, empty or whitespace
        """
        if product_code is None or not product_code.strip():
            raise ArgumentError(EMPTY_PRODUCT_CODE_MESSAGE)

        if await self.repository.delete_by_code(product_code):
            logger.info(f"Deleted product {product_code}")
        else:
            logger.debug(f"Nothing to delete for product code {product_code}")

    async def get_all(self) -> List[Product]:
        """Return all stored products ordered by id.

        Raises:
            NotFoundError: If no product is stored
        """
        products = await self.repository.list()
        if not products:
            raise NotFoundError(NO_PRODUCT_FOUND_MESSAGE)

        logger.debug(f"Fetched {len(products)} products")
        return products

    async def search_by_origin_country(self, origin_country: Optional[str]) -> List[Product]:
        """Return the products whose origin country matches exactly (case-sensitive).

        ``None`` matches no product.

        Raises:
            NotFoundError: If no product comes from ``origin_country``
        """
        products = await self.repository.list_by_origin_country(origin_country)
        if not products:
            raise NotFoundError(NO_PRODUCT_FOR_ORIGIN_COUNTRY_MESSAGE)

        logger.debug(f"Found {len(products)} products from {origin_country}")
        return products

    async def get_specific(self, product_code: str) -> Product:
        """Return the product with the given code.

        Raises:
            ProductCodeNotFoundError: If no product has that code
        """
        product = await self.repository.get_by_code(product_code)
        if product is None:
            raise ProductCodeNotFoundError(product_code)
        return product

    async def update(self, product: Product) -> Product:
        """
        Validate a product and store its new field values.

        The stored record is matched by id when set, otherwise by product code.
        A rejected product that the session tracks is reloaded, so none of its
        unsaved edits reach storage later.

        Args:
            product: The product carrying the new values

        Returns:
            The updated product

        Raises:
            ValidationError: If any field is invalid
            DuplicateProductCodeError: If another stored product holds the new code
            ProductCodeNotFoundError: If no stored product matches
            ProductConflictError: If storage rejects the new values anyway
        """
        product_code = product.product_code
        try:
            self._validate(product, INVALID_UPDATED_PRODUCT_MESSAGE)
            await self._check_code_free_for(product)
        except ProductsError:
            await self.repository.discard(product)
            raise

        try:
            updated = await self.repository.update(product)
        except IntegrityError as exc:
            logger.warning(f"Storage rejected update of product {product_code}: {exc.orig}")
            raise ProductConflictError(product_code) from exc
        if updated is None:
            raise ProductCodeNotFoundError(product_code)

        logger.info(f"Updated product {updated.product_code} with id {updated.id}")
        return updated

    async def _check_code_free_for(self, product: Product) -> None:
        # Only an update matched by id can move a product onto a code another row holds
        if product.id is None:
            return
        holder = await self.repository.get_by_code(product.product_code)
        if holder is None or holder.id == product.id:
            return
        if await self.repository.get_by_id(product.id) is not None:
            logger.warning(f"Rejected update of product id {product.id}: code {product.product_code} is taken")
            raise DuplicateProductCodeError(product.product_code)

    @staticmethod
    def _validate(product: Product, message: str) -> None:
        try:
            validate_product(product)
        except pydantic.ValidationError as exc:
            logger.warning(f"Rejected invalid product {product.product_code!r}: {exc.error_count()} field error(s)")
            raise ValidationError(message, errors=exc.errors(include_url=False)) from exc
