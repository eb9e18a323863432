"""ESPP transaction input and output records."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Finite decimal that serializes as a JSON number.
Amount = Annotated[
    Decimal,
    Field(allow_inf_nan=False),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ESPPInput(_Record):
    """One disqualifying-disposition transaction.

    Range rules are enforced by :func:`esppcalc.engines.validation.validate_input`,
    not by the model.
    """

    market_value_purchase_date: Amount
    discount_percent: Amount
    purchase_amount: Amount
    market_value_sale_date: Amount
    tax_rate_percent: Amount


class ESPPOutput(_Record):
    purchase_price_per_share: Amount
    discount_per_share: Amount
    capital_gain_per_share: Amount
    number_of_shares: int = Field(ge=0)
    total_purchase_price: Amount
    total_discount: Amount
    total_capital_gain: Amount
    amount_taxable_as_income: Amount
    total_tax: Amount
    total_profit: Amount
    percentage_gain_loss_on_investment: Amount
