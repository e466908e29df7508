"""
FieldError model: one entry of a validation error aggregate.
"""

from pydantic import BaseModel, ConfigDict


class FieldError(BaseModel):
    """
    A single field-qualified failure message.

    Attributes:
        field: Dotted field path ("Address.City"), None for record-level errors
        rule: Rule that produced the failure, None for structural errors
        message: Failure reason, phrased to follow the field name
    """

    model_config = ConfigDict(frozen=True)

    field: str | None = None
    rule: str | None = None
    message: str

    def with_prefix(self, prefix: str) -> "FieldError":
        """Qualify the field path with an enclosing field name."""
        field = f"{prefix}.{self.field}" if self.field else prefix
        return self.model_copy(update={"field": field})

    def __str__(self) -> str:
        if self.field is None:
            return self.message
        return f"{self.field} {self.message}"
