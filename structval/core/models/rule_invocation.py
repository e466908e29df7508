"""
RuleInvocation model: one parsed (name, options) pair from a rule specification.
"""

from pydantic import BaseModel, ConfigDict


class RuleInvocation(BaseModel):
    """
    A single rule applied to a field.

    Attributes:
        name: Rule name ("required", "min_length", "password", ...)
        options: Raw option string, "" when the rule has none
    """

    model_config = ConfigDict(frozen=True)

    name: str
    options: str = ""

    def __str__(self) -> str:
        return f"{self.name}={self.options}" if self.options else self.name
