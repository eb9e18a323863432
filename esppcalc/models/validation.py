"""Validation result models."""

from pydantic import BaseModel, Field

from esppcalc.models.espp import ESPPInput


class FieldError(BaseModel):
    field: str  # camelCase input field name
    message: str


class ValidationResult(BaseModel):
    input: ESPPInput | None = None
    errors: list[FieldError] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.input is not None and not self.errors
