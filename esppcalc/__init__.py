"""ESPP Calculator: after-tax outcome of a disqualifying ESPP sale."""

from esppcalc.engines.espp import calculate_espp
from esppcalc.exceptions import InvalidInput
from esppcalc.models.espp import ESPPInput, ESPPOutput

__version__ = "0.1.0"

__all__ = [
    "ESPPInput",
    "ESPPOutput",
    "InvalidInput",
    "calculate_espp",
]
