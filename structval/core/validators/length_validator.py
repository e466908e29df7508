"""
Length validators - bound the length of string and sequence fields.
"""

from typing import Any

from structval.core.models import FieldDescriptor

from .base_validator import BaseValidator


class _LengthValidator(BaseValidator):
    """
    Shared checks for the length family.

    Parameters:
    - length: Bound to compare against (inclusive)

    Only string and sequence kinds can be measured; anything else is a
    violation, never a silent pass.
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        length = self.parameters.get("length")
        if not isinstance(length, int):
            raise ValueError(f"{type(self).__name__} requires an integer 'length' parameter")
        self.length = length

    def _measure(self, field: FieldDescriptor) -> int:
        if not field.kind.has_length:
            raise self.fail(f"has an unsupported type for {self.rule_type} validation: {field.kind.value}")
        return len(field.value)


class MinLengthValidator(_LengthValidator):
    """Validates that a field has at least `length` elements or characters."""

    def validate(self, field: FieldDescriptor) -> None:
        if self._measure(field) < self.length:
            raise self.fail(f"must have a minimum length of {self.length} characters")

    @property
    def rule_type(self) -> str:
        return "min_length"


class MaxLengthValidator(_LengthValidator):
    """Validates that a field has at most `length` elements or characters."""

    def validate(self, field: FieldDescriptor) -> None:
        if self._measure(field) > self.length:
            raise self.fail(f"must have a maximum length of {self.length} characters")

    @property
    def rule_type(self) -> str:
        return "max_length"
