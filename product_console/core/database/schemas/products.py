"""
Schema models for product input validation.

These schemas describe what a well-formed product looks like before it is
allowed anywhere near storage. They are separate from the entity models,
which SQLModel does not validate on construction.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..entities.products import (
    DESCRIPTION_MAX_LENGTH,
    ORIGIN_COUNTRY_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    PRODUCT_CODE_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    Product,
)


class ProductInput(BaseModel):
    """Schema for a product submitted for creation or update."""

    # Whitespace-only strings collapse to "" and then fail min_length
    model_config = ConfigDict(str_strip_whitespace=True)

    id: Optional[int] = Field(default=None, ge=1)
    product_code: str = Field(min_length=1, max_length=PRODUCT_CODE_MAX_LENGTH)
    product_name: str = Field(min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH)
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    price: Decimal = Field(ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES)
    quantity: int = Field(ge=0)
    origin_country: str = Field(min_length=1, max_length=ORIGIN_COUNTRY_MAX_LENGTH)


def validate_product(product: Product) -> ProductInput:
    """Validate a product entity against the input schema.

    Raises:
        pydantic.ValidationError: If any field breaks a rule.
    """
    return ProductInput.model_validate(product.model_dump())
