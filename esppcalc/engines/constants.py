"""ESPP calculator configuration.

Input bounds, output rounding and the default values offered by the
command-line shell. Never hardcode these in computation functions.
"""

from decimal import ROUND_HALF_UP, Decimal

# ---------------------------------------------------------------------------
# Input bounds
# ---------------------------------------------------------------------------
MIN_DISCOUNT_PERCENT = Decimal("0")
# Exclusive: a 100% discount makes the purchase price zero.
MAX_DISCOUNT_PERCENT = Decimal("100")
MIN_TAX_RATE_PERCENT = Decimal("0")
MAX_TAX_RATE_PERCENT = Decimal("100")
# Upper bound for market values and the purchase amount.
MAX_MONEY_VALUE = Decimal("1000000000000")
# Smallest purchase price per share the discount may leave.
MIN_PURCHASE_PRICE = Decimal("0.000000000001")

# Significant digits for all calculator arithmetic. Within the bounds above,
# totals stay below 1e36 and the percentage return below 1e50.
WORKING_PRECISION = 60

# ---------------------------------------------------------------------------
# Output rounding: applied once, when the output record is built
# ---------------------------------------------------------------------------
CENTS = Decimal("0.01")
ROUNDING = ROUND_HALF_UP

HUNDRED = Decimal("100")

# ---------------------------------------------------------------------------
# Shell defaults (CLI options and wizard prompts)
# ---------------------------------------------------------------------------
DEFAULT_MARKET_VALUE_PURCHASE = Decimal("4.60")
DEFAULT_DISCOUNT_PERCENT = Decimal("15")
DEFAULT_PURCHASE_AMOUNT = Decimal("1000")
DEFAULT_MARKET_VALUE_SALE = Decimal("4.60")
DEFAULT_TAX_RATE_PERCENT = Decimal("40")
DEFAULT_STOCK_CHANGE_PERCENT = Decimal("0")

DEFAULT_INPUT: dict[str, Decimal] = {
    "marketValuePurchaseDate": DEFAULT_MARKET_VALUE_PURCHASE,
    "discountPercent": DEFAULT_DISCOUNT_PERCENT,
    "purchaseAmount": DEFAULT_PURCHASE_AMOUNT,
    "marketValueSaleDate": DEFAULT_MARKET_VALUE_SALE,
    "taxRatePercent": DEFAULT_TAX_RATE_PERCENT,
}
