"""
Base database models and utilities.

This module provides the declarative base shared by the table models. The
metadata carries a constraint naming convention so that indexes and unique
constraints get the same names on SQLite and PostgreSQL.
"""

from __future__ import annotations

from pydantic import ConfigDict
from sqlmodel import SQLModel

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Must be set before any table model is declared
SQLModel.metadata.naming_convention = NAMING_CONVENTION


class Base(SQLModel):
    """Declarative base for product console table models."""

    model_config = ConfigDict(arbitrary_types_allowed=True)
