"""Data models for the ESPP calculator."""

from esppcalc.models.espp import ESPPInput, ESPPOutput
from esppcalc.models.validation import FieldError, ValidationResult

__all__ = [
    "ESPPInput",
    "ESPPOutput",
    "FieldError",
    "ValidationResult",
]
