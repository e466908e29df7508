"""
Core data models for the struct validation engine.

All models use Pydantic for runtime validation and type safety.
"""

from .field_descriptor import FieldDescriptor, FieldKind
from .field_error import FieldError
from .password_policy import SPECIAL_CHARS, PasswordPolicy, default_password_policy
from .rule_invocation import RuleInvocation

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "FieldError",
    "PasswordPolicy",
    "default_password_policy",
    "SPECIAL_CHARS",
    "RuleInvocation",
]
