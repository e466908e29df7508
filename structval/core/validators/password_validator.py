"""
PasswordValidator - validates password composition against a PasswordPolicy.
"""

import string

from structval.core.models import SPECIAL_CHARS, FieldDescriptor, PasswordPolicy

from .base_validator import BaseValidator


def _contains_any(value: str, charset: str) -> bool:
    return any(char in charset for char in value)


class PasswordValidator(BaseValidator):
    """
    Validates a password against a policy.

    Parameters:
    - policy: PasswordPolicy to enforce (defaults to the built-in policy)

    Checks run in order (length, digit, uppercase, lowercase, special) and
    only the first failing check is reported. Disabled checks are skipped.
    """

    def __init__(self, field_name: str, parameters: dict | None = None):
        super().__init__(field_name, parameters)
        self.policy: PasswordPolicy = self.parameters.get("policy") or PasswordPolicy()

    def validate(self, field: FieldDescriptor) -> None:
        password = field.value
        if not isinstance(password, str):
            raise self.fail("has an invalid type for password validation")

        policy = self.policy

        if len(password) < policy.min_length:
            raise self.fail(f"must have a minimum length of {policy.min_length} characters")

        if policy.require_digits and not _contains_any(password, string.digits):
            raise self.fail("must contain at least one digit")

        if policy.require_uppercase and not _contains_any(password, string.ascii_uppercase):
            raise self.fail("must contain at least one uppercase letter")

        if policy.require_lowercase and not _contains_any(password, string.ascii_lowercase):
            raise self.fail("must contain at least one lowercase letter")

        if policy.require_special_chars and not _contains_any(password, SPECIAL_CHARS):
            raise self.fail("must contain at least one special character")

    @property
    def rule_type(self) -> str:
        return "password"
