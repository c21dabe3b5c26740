"""Error types for the products business layer.

Defines a small hierarchy of exceptions raised by the products manager. Each
error carries a ``kind`` tag naming its category and a fixed, caller-facing
message.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional

INVALID_PRODUCT_MESSAGE = "Invalid product!"
# Misspelling kept: callers match on this exact text
INVALID_UPDATED_PRODUCT_MESSAGE = "Invalid prduct!"
EMPTY_PRODUCT_CODE_MESSAGE = "Product code cannot be empty."
NO_PRODUCT_FOUND_MESSAGE = "No product found."
NO_PRODUCT_FOR_ORIGIN_COUNTRY_MESSAGE = "No product found with the given first name."


class ProductsError(Exception):
    """Base error for all products business exceptions."""

    kind: ClassVar[str] = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ProductsError, ValueError):
    """Raised when a product breaks a field rule and must not be stored."""

    kind = "validation"

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ArgumentError(ProductsError, ValueError):
    """Raised when a required argument is missing or blank."""

    kind = "argument"


class NotFoundError(ProductsError, LookupError):
    """Raised when a query yields no products."""

    kind = "not_found"


class ProductCodeNotFoundError(NotFoundError):
    """Raised when no product carries the requested product code."""

    def __init__(self, product_code: str) -> None:
        super().__init__(f"No product found with product code: {product_code}")
        self.product_code = product_code


class DuplicateProductCodeError(ArgumentError):
    """Raised when adding a product whose product code is already taken."""

    def __init__(self, product_code: str) -> None:
        super().__init__(f"Product with product code {product_code} already exists.")
        self.product_code = product_code


class DuplicateProductIdError(ArgumentError):
    """Raised when adding a product whose explicit id is already taken."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with id {product_id} already exists.")
        self.product_id = product_id


class ProductConflictError(ArgumentError):
    """Raised when storage rejects a product because it clashes with a stored one."""

    def __init__(self, product_code: str) -> None:
        super().__init__(f"Product {product_code} conflicts with a stored product.")
        self.product_code = product_code
