"""
structval - declarative struct validation.

Declare rules on dataclass or pydantic fields, then validate whole records
(nested records included) and get every failure back at once.
"""

from structval.core.errors import ValidationErrors
from structval.core.models import FieldDescriptor, FieldError, FieldKind, PasswordPolicy
from structval.core.rules import ValidatorConfig, ValidatorConfigLoader
from structval.core.schema import validated_field
from structval.core.validator import Validator
from structval.core.validators import RuleConfigError, RuleViolation

__version__ = "0.1.0"

__all__ = [
    "Validator",
    "ValidationErrors",
    "FieldError",
    "FieldDescriptor",
    "FieldKind",
    "PasswordPolicy",
    "ValidatorConfig",
    "ValidatorConfigLoader",
    "RuleViolation",
    "RuleConfigError",
    "validated_field",
]
