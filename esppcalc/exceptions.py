"""Custom exceptions for the ESPP calculator."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from esppcalc.models.validation import FieldError


class ESPPCalculationError(Exception):
    """Base exception for ESPP calculation errors."""


class InvalidInput(ESPPCalculationError):
    """Raised when an ESPP input record fails validation.

    ``field`` and ``message`` describe the first failure; ``errors`` holds
    every failure found by the validator.
    """

    def __init__(self, field: str, message: str, errors: list[FieldError] | None = None):
        self.field = field
        self.message = message
        self.errors = list(errors) if errors else []
        super().__init__(f"Validation error on '{field}': {message}")

    @classmethod
    def from_errors(cls, errors: list[FieldError]) -> InvalidInput:
        first = errors[0]
        return cls(first.field, first.message, errors)


class InputFormatError(ESPPCalculationError):
    """Raised when raw text cannot be parsed as a currency or percent value."""

    def __init__(self, value: str, kind: str):
        self.value = value
        self.kind = kind
        super().__init__(f"Cannot parse {value!r} as a {kind} value")
