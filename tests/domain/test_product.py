"""Unit tests for the Product entity."""

import pytest

from pcm.domain.exceptions import ValidationError
from pcm.domain.model.product import MAX_TEXT_LENGTH, Product


def _product(**overrides) -> Product:
    fields = dict(name="Pen", price=1.5, stock_quantity=100, category="Office")
    fields.update(overrides)
    return Product(**fields)


class TestProductValidate:

    def test_valid_product_passes(self):
        _product().validate()

    def test_zero_stock_allowed(self):
        _product(stock_quantity=0).validate()

    def test_two_character_name_allowed(self):
        _product(name="Ab").validate()

    @pytest.mark.parametrize("name", ["", "A", "  A  ", "   "])
    def test_short_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name too short"):
            _product(name=name).validate()

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError, match="name too short"):
            _product(name=None).validate()

    @pytest.mark.parametrize("price", [0, 0.0, -1.0])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(ValidationError, match="price must be positive"):
            _product(price=price).validate()

    def test_nan_price_rejected(self):
        with pytest.raises(ValidationError, match="price must be positive"):
            _product(price=float("nan")).validate()

    @pytest.mark.parametrize("price", [float("inf"), 1e309])
    def test_infinite_price_rejected(self, price):
        with pytest.raises(ValidationError, match="price must be a finite number"):
            _product(price=price).validate()

    def test_name_at_length_limit_allowed(self):
        _product(name="x" * MAX_TEXT_LENGTH).validate()

    def test_overlong_name_rejected(self):
        with pytest.raises(ValidationError, match="name too long"):
            _product(name="x" * (MAX_TEXT_LENGTH + 1)).validate()

    def test_overlong_category_rejected(self):
        with pytest.raises(ValidationError, match="category too long"):
            _product(category="x" * (MAX_TEXT_LENGTH + 1)).validate()

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="stock cannot be negative"):
            _product(stock_quantity=-1).validate()

    @pytest.mark.parametrize("category", ["", "   ", None])
    def test_blank_category_rejected(self, category):
        with pytest.raises(ValidationError, match="category required"):
            _product(category=category).validate()

    def test_first_failing_rule_wins(self):
        with pytest.raises(ValidationError, match="name too short"):
            _product(name="", price=-1, stock_quantity=-1, category="").validate()


class TestProductReplaceFields:

    def test_replaces_everything_but_id(self):
        product = _product(id=7)
        product.replace_fields(
            Product(name="Pencil", price=0.5, stock_quantity=3, category="School", id=99)
        )
        assert product == Product(
            name="Pencil", price=0.5, stock_quantity=3, category="School", id=7
        )
