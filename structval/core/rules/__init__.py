"""
Rule specification parsing, password policy resolution and validator configuration.
"""

from .password_rules import PasswordOptionsError, resolve_password_policy
from .rule_config import ValidatorConfig, ValidatorConfigLoader
from .tag_parser import parse_int_option, parse_key_values, parse_rule_spec

__all__ = [
    "parse_rule_spec",
    "parse_key_values",
    "parse_int_option",
    "resolve_password_policy",
    "PasswordOptionsError",
    "ValidatorConfig",
    "ValidatorConfigLoader",
]
