"""Contract for the products manager.

Callers depend on this protocol rather than on ``ProductsManager`` so that a
fake manager can stand in for the real one.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from product_console.core.database.entities.products import Product


@runtime_checkable
class ProductsManagerProtocol(Protocol):
    """Validate products and orchestrate their persistence."""

    async def add(self, product: Product) -> Product:
        """Validate and store a new product."""
        ...

    async def delete(self, product_code: Optional[str]) -> None:
        """Remove the product with the given code."""
        ...

    async def get_all(self) -> List[Product]:
        """Return every stored product."""
        ...

    async def search_by_origin_country(self, origin_country: Optional[str]) -> List[Product]:
        """Return products coming from ``origin_country``."""
        ...

    async def get_specific(self, product_code: str) -> Product:
        """Return the product with the given code."""
        ...

    async def update(self, product: Product) -> Product:
        """Validate and store changes to an existing product."""
        ...
