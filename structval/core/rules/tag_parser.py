"""
Rule specification parser.

Grammar::

    spec       := invocation ("," invocation)*
    invocation := name | name "=" options

Each entry is split on its first "=" only, so options may themselves contain
"=". Password sub-options are comma-joined too, so key=value entries that
directly follow a ``password=...`` entry and name a password sub-option are
folded back into that invocation::

    "required,password=min_length=6,require_digits=false"
    -> [required], [password: "min_length=6,require_digits=false"]

Declare top-level length rules before ``password=...`` to keep them separate.
"""

import re

from structval.core.models import PasswordPolicy, RuleInvocation
from structval.core.validators import RuleConfigError

PASSWORD_RULE = "password"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_rule_spec(spec: str) -> list[RuleInvocation]:
    """
    Parse a rule specification string into ordered invocations.

    Args:
        spec: Rule specification ("required,min_length=3,max_length=10")

    Returns:
        List of RuleInvocation in declaration order; empty entries are dropped
    """
    invocations: list[RuleInvocation] = []
    password_keys = PasswordPolicy.model_fields.keys()

    for entry in spec.split(","):
        entry = entry.strip()
        if not entry:
            continue

        name, _, options = entry.partition("=")

        last = invocations[-1] if invocations else None
        if last is not None and last.name == PASSWORD_RULE and last.options and options and name in password_keys:
            invocations[-1] = RuleInvocation(name=PASSWORD_RULE, options=f"{last.options},{entry}")
            continue

        invocations.append(RuleInvocation(name=name, options=options))

    return invocations


def parse_key_values(options: str) -> list[tuple[str, str]]:
    """
    Parse comma-separated key=value pairs.

    Args:
        options: Option string ("min_length=6,require_digits=false")

    Returns:
        List of (key, value) pairs in order

    Raises:
        ValueError: If any pair has no "="
    """
    pairs = []
    for part in options.split(","):
        key, sep, value = part.partition("=")
        if not sep:
            raise ValueError(f"invalid option format: {part!r}")
        pairs.append((key, value))
    return pairs


def parse_int(value: str) -> int | None:
    """Parse a base-10 integer, returning None when the text is not one."""
    if not _INT_PATTERN.fullmatch(value):
        return None
    return int(value)


def parse_bool(value: str) -> bool | None:
    """Parse a boolean spelled 1/0, t/f or true/false, returning None otherwise."""
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def parse_int_option(rule_name: str, options: str) -> int:
    """
    Parse the integer option of a length rule.

    Raises:
        RuleConfigError: If options is not an integer
    """
    value = parse_int(options)
    if value is None:
        raise RuleConfigError(rule_name, options)
    return value
