"""
Database repository layer using SQLModel.

All repositories are built on SQLModel for:
- Type-safe ORM operations with Pydantic models
- Async-first database access patterns
- Consistent CRUD interface via AsyncBaseRepository
- Query building utilities for filtering and pagination

Modules:
- base: AsyncBaseRepository and QueryBuilder utilities
- products: Product catalog repository operations
"""

from .base import AsyncBaseRepository, QueryBuilder
from .products import ProductRepository

__all__ = [
    "AsyncBaseRepository",
    "ProductRepository",
    "QueryBuilder",
]
