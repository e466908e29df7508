"""
Base validator interface for all field rules.

All validators must inherit from BaseValidator and implement the validate() method.
"""

from abc import ABC, abstractmethod
from typing import Any

from structval.core.models import FieldDescriptor


class RuleViolation(Exception):
    """Raised when a field fails a rule."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name} {message}")

    def __reduce__(self):
        return type(self), (self.rule_name, self.field_name, self.message)


class RuleConfigError(ValueError):
    """Raised when a rule's options cannot be parsed."""

    def __init__(self, rule_name: str, options: str):
        self.rule_name = rule_name
        self.options = options
        super().__init__(f"invalid {rule_name} options: {options}")

    def __reduce__(self):
        return type(self), (self.rule_name, self.options)


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements one rule of the tag language
    (required, min_length, max_length, email, password) for one field.
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Name of the field to validate
            parameters: Rule-specific parameters (e.g., min_length for MinLength)
        """
        self.field_name = field_name
        self.parameters = parameters or {}

    @abstractmethod
    def validate(self, field: FieldDescriptor) -> None:
        """
        Validate a field against this rule.

        Args:
            field: Descriptor of the field being validated

        Raises:
            RuleViolation: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule name used in rule specifications."""
        pass

    def fail(self, message: str) -> RuleViolation:
        """Build a RuleViolation for this validator's rule and field."""
        return RuleViolation(rule_name=self.rule_type, field_name=self.field_name, message=message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
