"""ESPP computation engines."""

from esppcalc.engines.espp import (
    ESPPCalculator,
    calculate_espp,
    change_percent_from_sale,
    sale_value_from_change,
)
from esppcalc.engines.validation import validate_input

__all__ = [
    "ESPPCalculator",
    "calculate_espp",
    "change_percent_from_sale",
    "sale_value_from_change",
    "validate_input",
]
