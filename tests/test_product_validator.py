"""
Products API: Product Validator Unit Tests
==========================================

What:  Tests for validate_product field rules.
How:   Pure function calls; no database or HTTP.

What we test:
    ✅ A complete record has no errors
    ✅ Each missing text field reports only its own message
    ✅ Price: absent, zero, empty, non-numeric, NaN → error; numbers and numeric strings → ok
    ✅ Rules are evaluated independently (all errors reported at once)
"""

import pytest

from app.services.product_validator import ValidationResult, validate_product


@pytest.fixture
def record():
    return {
        "name": "Pen",
        "brand": "Acme",
        "category": "Office",
        "price": 1.5,
        "description": "Blue ink",
    }


class TestValidationResult:
    """Tests for the ValidationResult container."""

    def test_empty_result_has_no_errors(self):
        assert ValidationResult().has_errors is False

    def test_result_with_error_has_errors(self):
        assert ValidationResult(errors={"name": "The name is required"}).has_errors is True


class TestRequiredTextFields:
    """Tests for name, brand, category and description."""

    def test_complete_record_is_valid(self, record):
        result = validate_product(record)
        assert result.has_errors is False
        assert result.errors == {}

    @pytest.mark.parametrize(
        "field, message",
        [
            ("name", "The name is required"),
            ("brand", "The brand is required"),
            ("category", "The category is required"),
            ("description", "The description is required"),
        ],
    )
    def test_missing_field_reports_only_that_field(self, record, field, message):
        del record[field]

        result = validate_product(record)

        assert result.has_errors is True
        assert result.errors == {field: message}

    @pytest.mark.parametrize("field", ["name", "brand", "category", "description"])
    def test_empty_string_is_missing(self, record, field):
        record[field] = ""
        assert field in validate_product(record).errors

    @pytest.mark.parametrize("field", ["name", "brand", "category", "description"])
    def test_none_is_missing(self, record, field):
        record[field] = None
        assert field in validate_product(record).errors


class TestPrice:
    """Tests for the price rule."""

    @pytest.mark.parametrize(
        "price",
        [None, False, 0, 0.0, "", "abc", "12abc", "1_000", "nan", "inf", float("nan"), float("inf")],
    )
    def test_invalid_price(self, record, price):
        record["price"] = price

        result = validate_product(record)

        assert result.errors == {"price": "The price is not valid"}

    def test_absent_price(self, record):
        del record["price"]
        assert validate_product(record).errors == {"price": "The price is not valid"}

    @pytest.mark.parametrize("price", [1, 1.5, 999.99, "12", "12.50", "0.5", " 7 ", ".5", "1e2", -3])
    def test_valid_price(self, record, price):
        record["price"] = price
        assert "price" not in validate_product(record).errors


class TestIndependentRules:
    """All failing rules are reported together."""

    def test_only_name_given(self):
        result = validate_product({"name": "Pen"})

        assert result.errors == {
            "brand": "The brand is required",
            "category": "The category is required",
            "price": "The price is not valid",
            "description": "The description is required",
        }

    def test_empty_record_reports_every_field(self):
        result = validate_product({})

        assert list(result.errors) == ["name", "brand", "category", "price", "description"]

    def test_validation_does_not_modify_input(self, record):
        snapshot = dict(record)
        validate_product(record)
        assert record == snapshot
