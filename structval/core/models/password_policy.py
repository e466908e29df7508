"""
PasswordPolicy model controlling password composition rules.
"""

from pydantic import BaseModel, Field


class PasswordPolicy(BaseModel):
    """
    Minimum length and required character classes for password validation.

    PasswordPolicy() with no arguments is the built-in default policy.

    Attributes:
        min_length: Minimum number of characters
        require_digits: At least one 0-9 character
        require_uppercase: At least one A-Z character
        require_lowercase: At least one a-z character
        require_special_chars: At least one of SPECIAL_CHARS
    """

    min_length: int = Field(8, ge=0)
    require_digits: bool = True
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_special_chars: bool = True

    model_config = {
        "json_schema_extra": {
            "example": {
                "min_length": 8,
                "require_digits": True,
                "require_uppercase": True,
                "require_lowercase": True,
                "require_special_chars": True,
            }
        }
    }


SPECIAL_CHARS = "~!@#$%^&*()-_+=<>?/[]{}|"


def default_password_policy() -> PasswordPolicy:
    """Return a fresh copy of the built-in default policy."""
    return PasswordPolicy()
