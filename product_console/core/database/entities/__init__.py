"""
Database entity models.

Modules:
- products: Product catalog table
"""

from . import products

__all__ = [
    "products",
]
