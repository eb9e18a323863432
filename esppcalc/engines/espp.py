"""ESPP disqualifying-disposition calculator.

The discount (FMV at purchase minus purchase price) is taxed as ordinary
income regardless of the sale outcome; the capital gain is the sale price
minus the purchase price. Arithmetic runs at WORKING_PRECISION significant
digits and is rounded to cents only when the output record is built.
"""

from collections.abc import Mapping
from decimal import ROUND_FLOOR, Decimal, localcontext
from typing import Any

from esppcalc.engines.constants import CENTS, HUNDRED, ROUNDING, WORKING_PRECISION
from esppcalc.engines.validation import validate_input
from esppcalc.exceptions import InvalidInput
from esppcalc.models.espp import ESPPInput, ESPPOutput
from esppcalc.models.validation import FieldError


class ESPPCalculator:
    """Computes per-share and total figures for one ESPP sale."""

    def calculate(self, data: ESPPInput | Mapping[str, Any]) -> ESPPOutput:
        """Validate the input and compute the outcome.

        Raises:
            InvalidInput: if any field fails validation.
        """
        result = validate_input(data)
        if not result.is_valid:
            raise InvalidInput.from_errors(result.errors)
        return self.compute(result.input)

    def compute(self, espp: ESPPInput) -> ESPPOutput:
        """Compute the outcome for an already validated input.

        Raises:
            InvalidInput: if the discount leaves no positive purchase price.
        """
        with localcontext() as ctx:
            ctx.prec = WORKING_PRECISION
            return self._compute(espp)

    def _compute(self, espp: ESPPInput) -> ESPPOutput:
        discount_per_share = espp.market_value_purchase_date * (espp.discount_percent / HUNDRED)
        purchase_price_per_share = espp.market_value_purchase_date - discount_per_share
        if purchase_price_per_share <= 0:
            raise InvalidInput.from_errors(
                [
                    FieldError(
                        field="discountPercent",
                        message="discount percent must be between 0 and 100, exclusive of 100",
                    )
                ]
            )
        shares = self.number_of_shares(espp.purchase_amount, purchase_price_per_share)

        total_purchase_price = shares * purchase_price_per_share
        total_discount = shares * discount_per_share
        capital_gain_per_share = espp.market_value_sale_date - purchase_price_per_share
        total_capital_gain = shares * capital_gain_per_share

        amount_taxable_as_income = total_discount
        total_tax = amount_taxable_as_income * (espp.tax_rate_percent / HUNDRED)
        total_profit = total_capital_gain - total_tax

        if total_purchase_price == 0:
            percentage = Decimal("0")
        else:
            percentage = total_profit / total_purchase_price * HUNDRED

        return ESPPOutput(
            purchase_price_per_share=_cents(purchase_price_per_share),
            discount_per_share=_cents(discount_per_share),
            capital_gain_per_share=_cents(capital_gain_per_share),
            number_of_shares=shares,
            total_purchase_price=_cents(total_purchase_price),
            total_discount=_cents(total_discount),
            total_capital_gain=_cents(total_capital_gain),
            amount_taxable_as_income=_cents(amount_taxable_as_income),
            total_tax=_cents(total_tax),
            total_profit=_cents(total_profit),
            percentage_gain_loss_on_investment=_cents(percentage),
        )

    @staticmethod
    def number_of_shares(purchase_amount: Decimal, price_per_share: Decimal) -> int:
        """Whole shares the contribution buys; fractional shares are dropped."""
        if price_per_share <= 0 or purchase_amount <= 0:
            return 0
        return int((purchase_amount / price_per_share).to_integral_value(rounding=ROUND_FLOOR))


def calculate_espp(data: ESPPInput | Mapping[str, Any]) -> ESPPOutput:
    """Validate ``data`` and compute the ESPP outcome.

    Raises:
        InvalidInput: if any field fails validation.
    """
    return ESPPCalculator().calculate(data)


def sale_value_from_change(purchase_value: Decimal, change_percent: Decimal) -> Decimal:
    """Sale-date market value implied by a stock price change in percent."""
    return purchase_value * (1 + change_percent / HUNDRED)


def change_percent_from_sale(purchase_value: Decimal, sale_value: Decimal) -> Decimal:
    """Stock price change in percent between purchase and sale market values."""
    if purchase_value <= 0:
        raise InvalidInput.from_errors(
            [FieldError(field="marketValuePurchaseDate", message="market value must be positive")]
        )
    return (sale_value - purchase_value) / purchase_value * HUNDRED


def _cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUNDING)
