"""
Rule implementations.

Provides validators for required fields, length bounds, email addresses
and password composition.
"""

from .base_validator import BaseValidator, RuleConfigError, RuleViolation
from .email_validator import EmailValidator
from .length_validator import MaxLengthValidator, MinLengthValidator
from .password_validator import PasswordValidator
from .required_validator import RequiredValidator, is_zero

__all__ = [
    "BaseValidator",
    "RuleViolation",
    "RuleConfigError",
    "RequiredValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "EmailValidator",
    "PasswordValidator",
    "is_zero",
]
