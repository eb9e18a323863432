"""Parsing and display helpers for currency and percent text."""

from decimal import Decimal, InvalidOperation, localcontext

from esppcalc.engines.constants import CENTS, ROUNDING, WORKING_PRECISION
from esppcalc.exceptions import InputFormatError


def parse_currency(value: str) -> Decimal:
    """Parse a dollar amount such as ``$1,234.56``, ``-$5`` or ``(12.00)``."""
    cleaned = value.strip().replace("$", "").replace(",", "").replace(" ", "")
    # Handle negative values in parentheses: (1234.56) -> -1234.56
    if cleaned.startswith("(") and cleaned.endswith(")"):
        cleaned = "-" + cleaned[1:-1]
    return _to_decimal(cleaned, value, "currency")


def parse_percent(value: str) -> Decimal:
    """Parse a percentage such as ``15%`` or ``-2.5 %``."""
    cleaned = value.strip().replace("%", "").replace(" ", "")
    return _to_decimal(cleaned, value, "percent")


def format_currency(value: Decimal) -> str:
    rounded = _round_cents(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${rounded.copy_abs():,.2f}"


def format_percent(value: Decimal) -> str:
    return f"{_round_cents(value):.2f}%"


def is_negative(value: Decimal) -> bool:
    return _round_cents(value) < 0


def _round_cents(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        return Decimal(value).quantize(CENTS, rounding=ROUNDING)


def _to_decimal(cleaned: str, original: str, kind: str) -> Decimal:
    if not cleaned:
        raise InputFormatError(original, kind)
    try:
        parsed = Decimal(cleaned)
    except InvalidOperation:
        raise InputFormatError(original, kind) from None
    if not parsed.is_finite():
        raise InputFormatError(original, kind)
    return parsed
