from __future__ import annotations

import os
import shutil
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# Point the process-wide engine at a throwaway database before the package is imported
_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="product_console_test_"))
os.environ.setdefault("PRODUCT_CONSOLE_DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'products.db'}")
os.environ.setdefault("PRODUCT_CONSOLE_ENABLE_FILE_LOGGING", "false")

from product_console.core.database.entities.products import Product


def pytest_sessionfinish(session, exitstatus):
    shutil.rmtree(_TEST_DB_DIR, ignore_errors=True)


@pytest.fixture(scope="function")
def sample_product_data() -> Dict[str, Any]:
    """Field values of a valid product."""
    return {
        "product_code": "1234AbcD",
        "id": 100,
        "product_name": "Random product",
        "quantity": 5,
        "price": Decimal("25.50"),
        "origin_country": "Croatia",
        "description": "Some descritpion",
    }


@pytest.fixture(scope="function")
def second_product_data() -> Dict[str, Any]:
    """Field values of another valid product with a different code and id."""
    return {
        "product_code": "9886ZXC",
        "id": 256,
        "product_name": "Second product",
        "quantity": 26,
        "price": Decimal("12.90"),
        "origin_country": "Belgium",
        "description": "Different description",
    }


@pytest.fixture(scope="function")
def make_product(sample_product_data: Dict[str, Any]) -> Callable[..., Product]:
    """Build a Product from the sample data with any field overridden."""

    def _make(**overrides: Any) -> Product:
        return Product(**{**sample_product_data, **overrides})

    return _make
