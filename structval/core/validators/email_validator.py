"""
EmailValidator - validates that a field holds an email address.
"""

import re

from structval.core.models import FieldDescriptor

from .base_validator import BaseValidator

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class EmailValidator(BaseValidator):
    """
    Validates the shape local@domain.tld.

    The local part allows letters, digits and ._%+-, the domain allows
    letters, digits, dots and hyphens, and the TLD needs two or more letters.
    Non-string values always fail.
    """

    def validate(self, field: FieldDescriptor) -> None:
        if not isinstance(field.value, str) or not EMAIL_PATTERN.fullmatch(field.value):
            raise self.fail("must be a valid email address")

    @property
    def rule_type(self) -> str:
        return "email"
