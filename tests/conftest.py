"""Shared test fixtures for the ESPP calculator."""

from decimal import Decimal

import pytest

from esppcalc.models.espp import ESPPInput


@pytest.fixture
def standard_input() -> ESPPInput:
    """15% discount, stock up from $50 to $60."""
    return ESPPInput(
        market_value_purchase_date=Decimal("50"),
        discount_percent=Decimal("15"),
        purchase_amount=Decimal("1500"),
        market_value_sale_date=Decimal("60"),
        tax_rate_percent=Decimal("25"),
    )


@pytest.fixture
def no_discount_input() -> ESPPInput:
    return ESPPInput(
        market_value_purchase_date=Decimal("50"),
        discount_percent=Decimal("0"),
        purchase_amount=Decimal("1500"),
        market_value_sale_date=Decimal("60"),
        tax_rate_percent=Decimal("25"),
    )


@pytest.fixture
def no_gain_input() -> ESPPInput:
    """Sold at exactly the discounted purchase price."""
    return ESPPInput(
        market_value_purchase_date=Decimal("50"),
        discount_percent=Decimal("10"),
        purchase_amount=Decimal("1500"),
        market_value_sale_date=Decimal("45"),
        tax_rate_percent=Decimal("25"),
    )


@pytest.fixture
def raw_input() -> dict:
    """Camel-case record as a JSON caller would send it."""
    return {
        "marketValuePurchaseDate": 50,
        "discountPercent": 10,
        "purchaseAmount": 1000000,
        "marketValueSaleDate": 60,
        "taxRatePercent": 25,
    }
