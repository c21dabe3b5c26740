"""
Business layer for the product catalog.

The manager validates input and orchestrates the product repository. Errors
raised here form a small taxonomy (validation, argument, not found) that
callers can handle by type or by ``kind``.
"""

from .contracts import ProductsManagerProtocol
from .errors import (
    ArgumentError,
    DuplicateProductCodeError,
    DuplicateProductIdError,
    NotFoundError,
    ProductCodeNotFoundError,
    ProductConflictError,
    ProductsError,
    ValidationError,
)
from .products_manager import ProductsManager

__all__ = [
    "ArgumentError",
    "DuplicateProductCodeError",
    "DuplicateProductIdError",
    "NotFoundError",
    "ProductCodeNotFoundError",
    "ProductConflictError",
    "ProductsError",
    "ProductsManager",
    "ProductsManagerProtocol",
    "ValidationError",
]
