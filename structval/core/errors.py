"""
Validation error aggregate.

ValidationErrors collects every failure of one validation pass. It is an
Exception so callers can raise it directly, and it is never handed back empty:
a passing record yields None instead.
"""

from collections.abc import Iterator

from structval.core.models import FieldError


class ValidationErrors(Exception):
    """Ordered collection of field-qualified failure messages."""

    def __init__(self, entries: list[FieldError] | None = None):
        self.entries: list[FieldError] = list(entries or [])
        super().__init__()

    def __reduce__(self):
        return type(self), (self.entries,)

    def append(self, entry: FieldError | str) -> None:
        """Add one entry; plain strings become record-level entries."""
        if isinstance(entry, str):
            entry = FieldError(message=entry)
        self.entries.append(entry)

    def merge(self, other: "ValidationErrors") -> None:
        """Absorb another aggregate's entries, keeping their relative order."""
        self.entries.extend(other.entries)

    def with_prefix(self, prefix: str) -> "ValidationErrors":
        """Return a copy whose entries are qualified by an enclosing field name."""
        return ValidationErrors([entry.with_prefix(prefix) for entry in self.entries])

    def messages(self) -> list[str]:
        """Rendered messages in append order."""
        return [str(entry) for entry in self.entries]

    def for_field(self, field: str) -> list[FieldError]:
        """Entries whose dotted path is exactly field."""
        return [entry for entry in self.entries if entry.field == field]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __str__(self) -> str:
        return "\n".join(self.messages())

    def __repr__(self) -> str:
        return f"ValidationErrors({self.messages()!r})"
