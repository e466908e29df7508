"""
Record introspection: builds field descriptors from dataclasses and pydantic models.
"""

from .introspection import describe_fields, is_record, validated_field

__all__ = [
    "describe_fields",
    "is_record",
    "validated_field",
]
