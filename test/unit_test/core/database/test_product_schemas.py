"""Unit tests for product input validation schema."""

from __future__ import annotations

from decimal import Decimal

import pydantic
import pytest

from product_console.core.database.entities.products import Product
from product_console.core.database.schemas.products import ProductInput, validate_product


class TestValidateProduct:
    """Rules applied by validate_product."""

    def test_valid_product(self, make_product):
        validated = validate_product(make_product())

        assert isinstance(validated, ProductInput)
        assert validated.price == Decimal("25.50")
        assert validated.product_code == "1234AbcD"

    def test_zero_price_and_quantity_are_allowed(self, make_product):
        validated = validate_product(make_product(price=Decimal("0"), quantity=0))

        assert validated.price == Decimal("0")
        assert validated.quantity == 0

    def test_default_product_is_invalid(self):
        with pytest.raises(pydantic.ValidationError) as exc_info:
            validate_product(Product())

        failed_fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert failed_fields == {"product_code", "product_name", "description", "origin_country"}

    def test_negative_price_is_invalid(self, make_product):
        with pytest.raises(pydantic.ValidationError) as exc_info:
            validate_product(make_product(price=Decimal("-1")))

        assert exc_info.value.errors()[0]["type"] == "greater_than_equal"

    def test_price_digits_are_capped_at_fifteen(self, make_product):
        assert validate_product(make_product(price=Decimal("9999999999999.99"))).price == Decimal("9999999999999.99")

        with pytest.raises(pydantic.ValidationError) as exc_info:
            validate_product(make_product(price=Decimal("99999999999999.99")))

        assert exc_info.value.errors()[0]["type"] == "decimal_max_digits"

    def test_price_column_matches_schema_precision(self):
        price_type = Product.__table__.c.price.type

        assert (price_type.precision, price_type.scale) == (15, 2)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("product_code", "A" * 17),
            ("product_name", "N" * 101),
            ("description", "D" * 501),
            ("origin_country", "C" * 51),
        ],
    )
    def test_overlong_strings_are_invalid(self, make_product, field, value):
        with pytest.raises(pydantic.ValidationError):
            validate_product(make_product(**{field: value}))

    def test_surrounding_whitespace_is_not_blank(self, make_product):
        validated = validate_product(make_product(origin_country="  Croatia "))

        assert validated.origin_country == "Croatia"

    def test_validation_leaves_entity_untouched(self, make_product):
        product = make_product(origin_country="  Croatia ")

        validate_product(product)

        assert product.origin_country == "  Croatia "

    def test_non_positive_id_is_invalid(self, make_product):
        with pytest.raises(pydantic.ValidationError):
            validate_product(make_product(id=0))
