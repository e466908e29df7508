"""
FieldDescriptor model representing one record field during a validation pass.
"""

from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any

from pydantic import BaseModel, ConfigDict


class FieldKind(str, Enum):
    """Kind of a field value, as seen by the rule functions."""

    STRING = "string"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    NIL = "nil"
    RECORD = "record"
    OTHER = "other"

    @classmethod
    def of(cls, value: Any) -> "FieldKind":
        """
        Classify a runtime value.

        Args:
            value: The field value

        Returns:
            The FieldKind of the value
        """
        # Imported here to avoid a cycle with the schema package
        from structval.core.schema.introspection import is_record

        if value is None:
            return cls.NIL
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int | float | complex | Decimal | Fraction):
            return cls.NUMERIC
        if isinstance(value, str | bytes | bytearray):
            return cls.STRING
        if isinstance(value, dict):
            return cls.MAPPING
        if isinstance(value, list | tuple | set | frozenset):
            return cls.SEQUENCE
        if is_record(value):
            return cls.RECORD
        return cls.OTHER

    @property
    def has_length(self) -> bool:
        """Whether length-family rules can measure this kind."""
        return self in (FieldKind.STRING, FieldKind.SEQUENCE)


class FieldDescriptor(BaseModel):
    """
    Abstract view of one record field (immutable for one validation pass).

    Attributes:
        name: Field name as declared on the record
        value: Runtime value of the field
        kind: Kind of the value
        rules: Rule specification string ("required,min_length=3")
        json_name: Optional serialization-name hint (not used for validation)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    value: Any = None
    kind: FieldKind
    rules: str = ""
    json_name: str | None = None

    @classmethod
    def for_value(
        cls,
        name: str,
        value: Any,
        rules: str = "",
        json_name: str | None = None,
    ) -> "FieldDescriptor":
        """Build a descriptor, deriving the kind from the value."""
        return cls(name=name, value=value, kind=FieldKind.of(value), rules=rules, json_name=json_name)
