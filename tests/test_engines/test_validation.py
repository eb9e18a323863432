"""Tests for ESPP input validation."""

from decimal import Decimal

import pytest

from esppcalc.engines.validation import validate_input
from esppcalc.models.espp import ESPPInput


def _record(**overrides) -> dict:
    record = {
        "marketValuePurchaseDate": "50",
        "discountPercent": "15",
        "purchaseAmount": "1500",
        "marketValueSaleDate": "60",
        "taxRatePercent": "25",
    }
    record.update(overrides)
    return record


class TestValidateInput:
    def test_valid_mapping(self):
        result = validate_input(_record())
        assert result.is_valid
        assert result.errors == []
        assert result.input.discount_percent == Decimal("15")

    def test_valid_model(self, standard_input: ESPPInput):
        result = validate_input(standard_input)
        assert result.is_valid
        assert result.input == standard_input

    def test_snake_case_keys_accepted(self):
        result = validate_input(
            {
                "market_value_purchase_date": 50,
                "discount_percent": 15,
                "purchase_amount": 1500,
                "market_value_sale_date": 60,
                "tax_rate_percent": 25,
            }
        )
        assert result.is_valid

    @pytest.mark.parametrize("discount", ["0", "50", "99.99"])
    def test_discount_in_range_passes(self, discount):
        assert validate_input(_record(discountPercent=discount)).is_valid

    @pytest.mark.parametrize("discount", ["100", "100.5", "-0.01"])
    def test_discount_out_of_range_fails(self, discount):
        result = validate_input(_record(discountPercent=discount))
        assert not result.is_valid
        assert result.input is None
        assert result.errors[0].field == "discountPercent"
        assert result.errors[0].message == "discount percent must be between 0 and 100, exclusive of 100"

    @pytest.mark.parametrize("rate", ["0", "100"])
    def test_tax_rate_bounds_inclusive(self, rate):
        assert validate_input(_record(taxRatePercent=rate)).is_valid

    @pytest.mark.parametrize("rate", ["-1", "100.01"])
    def test_tax_rate_out_of_range_fails(self, rate):
        result = validate_input(_record(taxRatePercent=rate))
        assert [e.field for e in result.errors] == ["taxRatePercent"]
        assert result.errors[0].message == "tax rate percent must be between 0 and 100"

    @pytest.mark.parametrize("field", ["marketValuePurchaseDate", "marketValueSaleDate"])
    @pytest.mark.parametrize("value", ["0", "-50"])
    def test_market_values_must_be_positive(self, field, value):
        result = validate_input(_record(**{field: value}))
        assert [e.field for e in result.errors] == [field]
        assert result.errors[0].message == "market value must be positive"

    def test_purchase_amount_must_be_positive(self):
        result = validate_input(_record(purchaseAmount="0"))
        assert [e.field for e in result.errors] == ["purchaseAmount"]
        assert result.errors[0].message == "purchase amount must be positive"

    def test_missing_field_reported(self):
        record = _record()
        del record["taxRatePercent"]
        result = validate_input(record)
        assert [e.field for e in result.errors] == ["taxRatePercent"]
        assert result.errors[0].message == "field required"

    def test_non_numeric_reported(self):
        result = validate_input(_record(purchaseAmount="lots"))
        assert [e.field for e in result.errors] == ["purchaseAmount"]

    @pytest.mark.parametrize("value", ["NaN", "Infinity", float("nan"), float("inf")])
    def test_non_finite_rejected(self, value):
        result = validate_input(_record(marketValueSaleDate=value))
        assert [e.field for e in result.errors] == ["marketValueSaleDate"]

    def test_bool_rejected(self):
        result = validate_input(_record(discountPercent=True))
        assert [e.field for e in result.errors] == ["discountPercent"]

    def test_validation_is_total(self):
        result = validate_input(_record(purchaseAmount="abc", discountPercent="100", taxRatePercent="-5"))
        fields = sorted(e.field for e in result.errors)
        assert fields == ["discountPercent", "purchaseAmount", "taxRatePercent"]

    @pytest.mark.parametrize("field", ["marketValuePurchaseDate", "marketValueSaleDate", "purchaseAmount"])
    def test_money_upper_bound_inclusive(self, field):
        assert validate_input(_record(**{field: "1000000000000"})).is_valid

    @pytest.mark.parametrize("field", ["marketValuePurchaseDate", "marketValueSaleDate", "purchaseAmount"])
    def test_money_above_upper_bound_fails(self, field):
        result = validate_input(_record(**{field: "1000000000000.01"}))
        assert [e.field for e in result.errors] == [field]
        assert result.errors[0].message.endswith("must not exceed 1,000,000,000,000")

    def test_discount_leaving_near_zero_price_fails(self):
        result = validate_input(_record(discountPercent="99.99999999999999999999999999"))
        assert [e.field for e in result.errors] == ["discountPercent"]
        assert result.errors[0].message == "purchase price per share must be at least 0.000000000001"

    def test_tiny_market_value_without_discount_fails(self):
        result = validate_input(_record(marketValuePurchaseDate="0.0000000000001", discountPercent="0"))
        assert [e.field for e in result.errors] == ["marketValuePurchaseDate"]
        assert "purchase price per share" in result.errors[0].message

    def test_smallest_purchase_price_passes(self):
        assert validate_input(_record(marketValuePurchaseDate="0.000000000002", discountPercent="50")).is_valid

    def test_price_check_skipped_when_discount_already_invalid(self):
        result = validate_input(_record(discountPercent="100"))
        assert len(result.errors) == 1
