"""
RequiredValidator - ensures a field is not empty, nil, or a zero value.
"""

from typing import Any

from structval.core.models import FieldDescriptor, FieldKind
from structval.core.schema import describe_fields

from .base_validator import BaseValidator


def is_zero(value: Any, _seen: frozenset[int] = frozenset()) -> bool:
    """
    Return True if value is the zero value for its kind.

    Strings, sequences and mappings are zero when empty, None is zero,
    numbers are zero when equal to 0 and booleans when False. Records are
    zero when every field is zero; a record already being checked further up
    the same chain adds nothing, so cycles terminate. Any other object is
    never zero and its type is never instantiated.
    """
    kind = FieldKind.of(value)
    if kind is FieldKind.NIL:
        return True
    if kind in (FieldKind.STRING, FieldKind.SEQUENCE, FieldKind.MAPPING):
        return len(value) == 0
    if kind is FieldKind.BOOLEAN:
        return not value
    if kind is FieldKind.NUMERIC:
        return value == 0
    if kind is FieldKind.RECORD:
        if id(value) in _seen:
            return True
        seen = _seen | {id(value)}
        return all(is_zero(field.value, seen) for field in describe_fields(value))
    return False


class RequiredValidator(BaseValidator):
    """
    Validates that a required field carries a value.

    Fails if:
    - String, sequence or mapping is empty
    - Value is None
    - Scalar or record equals its zero value
    """

    def validate(self, field: FieldDescriptor) -> None:
        if field.kind is FieldKind.NIL:
            raise self.fail("is required and must not be nil")

        if field.kind in (FieldKind.STRING, FieldKind.SEQUENCE, FieldKind.MAPPING):
            if len(field.value) == 0:
                raise self.fail("is required and must not be empty")
            return

        if is_zero(field.value):
            raise self.fail("is required and must not be zero value")

    @property
    def rule_type(self) -> str:
        return "required"
