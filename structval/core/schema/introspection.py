"""
Field descriptor provider.

Turns record instances into FieldDescriptor lists so the engine never touches
language-level type metadata. Two record flavours are supported:

- dataclasses, with rules in field metadata::

    @dataclass
    class User:
        username: str = validated_field("required,min_length=3", json="username")

- pydantic models, with rules in ``json_schema_extra``::

    class User(BaseModel):
        username: str = Field(json_schema_extra={"validate": "required"})
"""

import dataclasses
from typing import Any

from pydantic import BaseModel

from structval.core.models import FieldDescriptor

RULES_KEY = "validate"
JSON_KEY = "json"


def is_record(value: Any) -> bool:
    """Return True if value is a record instance (not a record class)."""
    if isinstance(value, type):
        return False
    return isinstance(value, BaseModel) or dataclasses.is_dataclass(value)


def validated_field(rules: str, *, json: str | None = None, **kwargs: Any) -> Any:
    """
    Declare a dataclass field carrying a rule specification.

    Args:
        rules: Rule specification string ("required,email")
        json: Optional serialization-name hint
        **kwargs: Passed through to dataclasses.field (default, default_factory, ...)

    Returns:
        A dataclasses.Field
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[RULES_KEY] = rules
    if json is not None:
        metadata[JSON_KEY] = json
    return dataclasses.field(metadata=metadata, **kwargs)


def describe_fields(record: Any) -> list[FieldDescriptor]:
    """
    Build descriptors for every field of a record, in declaration order.

    Args:
        record: A dataclass or pydantic model instance

    Returns:
        List of FieldDescriptor

    Raises:
        TypeError: If record is not a record instance
    """
    if isinstance(record, BaseModel):
        return _describe_model(record)
    if is_record(record):
        return _describe_dataclass(record)
    raise TypeError(f"unsupported type for validation: {type(record).__name__}")


def _describe_dataclass(record: Any) -> list[FieldDescriptor]:
    descriptors = []
    for field in dataclasses.fields(record):
        descriptors.append(
            FieldDescriptor.for_value(
                name=field.name,
                value=getattr(record, field.name),
                rules=field.metadata.get(RULES_KEY, ""),
                json_name=field.metadata.get(JSON_KEY),
            )
        )
    return descriptors


def _describe_model(record: BaseModel) -> list[FieldDescriptor]:
    descriptors = []
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        descriptors.append(
            FieldDescriptor.for_value(
                name=name,
                value=getattr(record, name),
                rules=str(extra.get(RULES_KEY, "")),
                json_name=info.alias,
            )
        )
    return descriptors
