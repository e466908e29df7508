"""
Password rule-set resolution.

The effective policy for a password field comes from three sources, highest
priority first: inline options on the field, the validator's custom policy,
and the built-in default policy.
"""

from structval.core.models import PasswordPolicy, default_password_policy
from structval.core.validators import RuleConfigError

from .tag_parser import parse_bool, parse_int, parse_key_values


class PasswordOptionsError(RuleConfigError):
    """
    Raised when inline password options are malformed.

    Attributes:
        fallback: Policy to use instead (always the built-in default)
    """

    def __init__(self, options: str):
        super().__init__("password", options)
        self.fallback = default_password_policy()

    def __reduce__(self):
        return type(self), (self.options,)


def resolve_password_policy(options: str, custom_policy: PasswordPolicy | None = None) -> PasswordPolicy:
    """
    Resolve the password policy for one field.

    Unparseable integer or boolean values leave the prior setting in place;
    unknown keys are ignored.

    Args:
        options: Inline options from the password rule ("" when absent)
        custom_policy: Validator-scoped policy, if one is set

    Returns:
        The merged PasswordPolicy (a new object, never custom_policy itself)

    Raises:
        PasswordOptionsError: If an option pair has no "="
    """
    if not options and custom_policy is None:
        return default_password_policy()

    base = custom_policy if custom_policy is not None else default_password_policy()
    if not options:
        return base.model_copy()

    try:
        pairs = parse_key_values(options)
    except ValueError as e:
        raise PasswordOptionsError(options) from e

    updates: dict[str, int | bool] = {}
    for key, raw in pairs:
        if key == "min_length":
            number = parse_int(raw)
            if number is not None:
                updates[key] = number
        elif key in ("require_digits", "require_uppercase", "require_lowercase", "require_special_chars"):
            flag = parse_bool(raw)
            if flag is not None:
                updates[key] = flag

    return base.model_copy(update=updates)
