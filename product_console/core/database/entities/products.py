"""
Product entity models.

This module contains the database entity for the product catalog. A product
is identified in storage by its integer primary key and, for the business,
by its unique product code.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlmodel import Field

from ..base import Base

PRODUCT_CODE_MAX_LENGTH = 16
PRODUCT_NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
ORIGIN_COUNTRY_MAX_LENGTH = 50
# SQLite keeps NUMERIC values as REAL, which holds 15 significant digits exactly
PRICE_MAX_DIGITS = 15
PRICE_DECIMAL_PLACES = 2


class ProductBase(Base):
    """Base fields for a catalog product."""

    product_code: str = Field(
        default="",
        max_length=PRODUCT_CODE_MAX_LENGTH,
        unique=True,
        index=True,
        description="Unique business key assigned by a person (e.g., 'AB12C')",
    )
    product_name: str = Field(default="", max_length=PRODUCT_NAME_MAX_LENGTH, description="Product display name")
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH, description="Free-text description")
    price: Decimal = Field(
        default=Decimal("0"), max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES, description="Unit price"
    )
    quantity: int = Field(default=0, description="Units in stock")
    origin_country: str = Field(
        default="",
        max_length=ORIGIN_COUNTRY_MAX_LENGTH,
        index=True,
        description="Country the product comes from",
    )


class Product(ProductBase, table=True):
    """Persistent catalog product.

    Table: products
    """

    __tablename__ = "products"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Product(id={self.id}, code={self.product_code}, name={self.product_name})"
