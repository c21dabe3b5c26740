"""
Schema models for validating data before it reaches the database layer.
"""

from .products import ProductInput, validate_product

__all__ = [
    "ProductInput",
    "validate_product",
]
