"""ESPP input validation.

Checks every field and collects every failure, so a caller can report all
problems at once. Nothing here raises for bad data; the calculator turns a
failed :class:`ValidationResult` into :class:`~esppcalc.exceptions.InvalidInput`.
"""

from collections.abc import Mapping
from decimal import Decimal, localcontext
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from esppcalc.engines.constants import (
    HUNDRED,
    MAX_DISCOUNT_PERCENT,
    MAX_MONEY_VALUE,
    MAX_TAX_RATE_PERCENT,
    MIN_DISCOUNT_PERCENT,
    MIN_PURCHASE_PRICE,
    MIN_TAX_RATE_PERCENT,
    WORKING_PRECISION,
)
from esppcalc.models.espp import Amount, ESPPInput
from esppcalc.models.validation import FieldError, ValidationResult

_AMOUNT = TypeAdapter(Amount)

# attribute name -> camelCase field name
FIELD_NAMES: dict[str, str] = {
    name: info.alias or to_camel(name) for name, info in ESPPInput.model_fields.items()
}


def validate_input(data: ESPPInput | Mapping[str, Any]) -> ValidationResult:
    """Validate an ESPP input record.

    Args:
        data: An ``ESPPInput`` or a mapping keyed by camelCase or snake_case
            field names.

    Returns:
        ValidationResult holding the parsed ``ESPPInput`` when every rule
        passes, otherwise the list of field errors.
    """
    if isinstance(data, ESPPInput):
        values = data.model_dump()
        errors: list[FieldError] = []
    else:
        values, errors = _coerce_fields(data)

    errors.extend(_check_ranges(values))
    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(input=ESPPInput(**values))


def _coerce_fields(data: Mapping[str, Any]) -> tuple[dict[str, Decimal], list[FieldError]]:
    values: dict[str, Decimal] = {}
    errors: list[FieldError] = []
    for name, alias in FIELD_NAMES.items():
        if alias in data:
            raw = data[alias]
        elif name in data:
            raw = data[name]
        else:
            errors.append(FieldError(field=alias, message="field required"))
            continue
        if raw is None or isinstance(raw, bool):
            errors.append(FieldError(field=alias, message="value must be a number"))
            continue
        try:
            values[name] = _AMOUNT.validate_python(raw)
        except ValidationError as exc:
            errors.append(FieldError(field=alias, message=exc.errors()[0]["msg"]))
    return values, errors


def _check_ranges(values: Mapping[str, Decimal]) -> list[FieldError]:
    errors: list[FieldError] = []

    for name in ("market_value_purchase_date", "market_value_sale_date"):
        value = values.get(name)
        if value is None:
            continue
        if value <= 0:
            errors.append(FieldError(field=FIELD_NAMES[name], message="market value must be positive"))
        elif value > MAX_MONEY_VALUE:
            errors.append(
                FieldError(field=FIELD_NAMES[name], message=f"market value must not exceed {MAX_MONEY_VALUE:,}")
            )

    amount = values.get("purchase_amount")
    if amount is not None and amount <= 0:
        errors.append(
            FieldError(field=FIELD_NAMES["purchase_amount"], message="purchase amount must be positive")
        )
    elif amount is not None and amount > MAX_MONEY_VALUE:
        errors.append(
            FieldError(
                field=FIELD_NAMES["purchase_amount"],
                message=f"purchase amount must not exceed {MAX_MONEY_VALUE:,}",
            )
        )

    discount = values.get("discount_percent")
    if discount is not None and not (MIN_DISCOUNT_PERCENT <= discount < MAX_DISCOUNT_PERCENT):
        errors.append(
            FieldError(
                field=FIELD_NAMES["discount_percent"],
                message="discount percent must be between 0 and 100, exclusive of 100",
            )
        )

    tax_rate = values.get("tax_rate_percent")
    if tax_rate is not None and not (MIN_TAX_RATE_PERCENT <= tax_rate <= MAX_TAX_RATE_PERCENT):
        errors.append(
            FieldError(
                field=FIELD_NAMES["tax_rate_percent"],
                message="tax rate percent must be between 0 and 100",
            )
        )

    failed = {error.field for error in errors}
    if not failed & {FIELD_NAMES["market_value_purchase_date"], FIELD_NAMES["discount_percent"]}:
        errors.extend(_check_purchase_price(values))
    return errors


def _check_purchase_price(values: Mapping[str, Decimal]) -> list[FieldError]:
    """The discounted price must stay positive at working precision."""
    market_value = values.get("market_value_purchase_date")
    discount = values.get("discount_percent")
    if market_value is None or discount is None:
        return []

    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        price = market_value - market_value * (discount / HUNDRED)
    if price >= MIN_PURCHASE_PRICE:
        return []

    field = "discount_percent" if discount > 0 else "market_value_purchase_date"
    return [
        FieldError(
            field=FIELD_NAMES[field],
            message=f"purchase price per share must be at least {MIN_PURCHASE_PRICE:f}",
        )
    ]
