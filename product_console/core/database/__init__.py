"""
Database layer for the product console.

Structure:
- entities/: Database entity models
- repositories/: Data access layer
- schemas/: Validation schemas for data entering the database layer
- session.py: Global engine and session factory management
- utils.py: Engine, sessionmaker and table creation helpers
"""

from .base import Base
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)

__all__ = [
    "Base",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
]
