"""
Core validation engine: models, rule validators, rule parsing and traversal.
"""

from .errors import ValidationErrors
from .validator import RuleFunc, Validator

__all__ = [
    "ValidationErrors",
    "Validator",
    "RuleFunc",
]
