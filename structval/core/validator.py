"""
Validation engine.

The Validator walks a record's fields, applies each field's rule
specification, recurses into nested records and collects every failure into
one ValidationErrors aggregate.

Sibling fields are validated concurrently, one task per field. Each nested
record gets its own pool inside its parent field's task, so a level never
waits on workers it shares with its children. Tasks collect failures locally
and the parent merges them after the join in field declaration order.

A record already on the current path, such as a back-reference to a parent,
is not descended into again.
"""

import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any

from structval.core.errors import ValidationErrors
from structval.core.models import FieldDescriptor, FieldError, FieldKind, PasswordPolicy, RuleInvocation
from structval.core.rules import (
    PasswordOptionsError,
    ValidatorConfig,
    parse_int_option,
    parse_rule_spec,
    resolve_password_policy,
)
from structval.core.schema import describe_fields, is_record
from structval.core.validators import (
    BaseValidator,
    EmailValidator,
    MaxLengthValidator,
    MinLengthValidator,
    PasswordValidator,
    RequiredValidator,
    RuleConfigError,
    RuleViolation,
)
from structval.observability.logger import get_logger
from structval.observability.metrics import (
    UNLABELED_RECORD_TYPE,
    record_validation,
    track_duration,
    validation_duration_seconds,
)

logger = get_logger(__name__)

# A custom rule receives the field and its raw options string and raises
# RuleViolation (or RuleConfigError) on failure.
RuleFunc = Callable[[FieldDescriptor, str], None]

_RESERVED_CHARS = (",", "=")


class Validator:
    """
    Validates records against the rules declared on their fields.

    Usage:
        validator = Validator()
        errors = validator.validate(user)
        if errors:
            print(errors)
    """

    def __init__(
        self,
        strict_rules: bool = False,
        max_workers: int | None = None,
        label_record_type: bool = False,
    ):
        """
        Initialize the validator.

        Args:
            strict_rules: Report unknown rule names as errors instead of ignoring them
            max_workers: Cap on concurrent field tasks per record level (None = one per field)
            label_record_type: Label metrics with the record class name instead of
                UNLABELED_RECORD_TYPE (one series per class, so keep the class set bounded)
        """
        self.strict_rules = strict_rules
        self.max_workers = max_workers
        self.label_record_type = label_record_type

        self._lock = threading.Lock()
        self._custom_password_rules: PasswordPolicy | None = None
        self._custom_rules: dict[str, RuleFunc] = {}

        self._builders: dict[str, Callable[[FieldDescriptor, str, ValidationErrors], BaseValidator | None]] = {
            "required": self._build_required,
            "email": self._build_email,
            "min_length": self._build_min_length,
            "max_length": self._build_max_length,
            "password": self._build_password,
        }

    @classmethod
    def from_config(cls, config: ValidatorConfig) -> "Validator":
        """Build a validator from loaded settings."""
        validator = cls(
            strict_rules=config.strict_rules,
            max_workers=config.max_workers,
            label_record_type=config.label_record_type,
        )
        if config.password is not None:
            validator.set_custom_password_rules(config.password)
        return validator

    # =======================
    # CONFIGURATION
    # =======================

    def set_custom_password_rules(self, policy: PasswordPolicy | None) -> None:
        """
        Replace the validator-scoped password policy.

        Takes effect for subsequent validate calls; calls already in flight
        may see either policy. Pass None to go back to the built-in default.
        """
        with self._lock:
            self._custom_password_rules = policy.model_copy() if policy is not None else None
        logger.debug("Custom password rules updated", extra={"policy": policy.model_dump() if policy else None})

    def get_custom_password_rules(self) -> PasswordPolicy | None:
        """Return a copy of the validator-scoped password policy, if set."""
        with self._lock:
            policy = self._custom_password_rules
            return policy.model_copy() if policy is not None else None

    def register_rule(self, name: str, func: RuleFunc) -> None:
        """
        Add a custom rule to the lookup table.

        Args:
            name: Rule name as used in rule specifications
            func: Callable taking (field, options); raises RuleViolation on failure

        Raises:
            ValueError: If the name is empty, contains "," or "=", or is already registered
        """
        if not name or name != name.strip() or any(char in name for char in _RESERVED_CHARS):
            raise ValueError(f"Invalid rule name: {name!r}")
        if not callable(func):
            raise ValueError("Rule function must be callable")

        with self._lock:
            if name in self._builders or name in self._custom_rules:
                raise ValueError(f"Rule already registered: {name}")
            self._custom_rules[name] = func

    # =======================
    # VALIDATION
    # =======================

    def validate(self, record: Any) -> ValidationErrors | None:
        """
        Validate a record against all rules declared on its fields.

        Args:
            record: A dataclass or pydantic model instance

        Returns:
            None if every rule passes, otherwise a non-empty ValidationErrors
        """
        record_type = type(record).__name__
        metric_label = record_type if self.label_record_type else UNLABELED_RECORD_TYPE

        with track_duration(validation_duration_seconds, record_type=metric_label):
            if is_record(record):
                errors = self._validate_record(record, frozenset())
            else:
                errors = ValidationErrors([FieldError(message=f"unsupported type for validation: {record_type}")])

        record_validation(metric_label, [entry.rule or "structural" for entry in errors])

        if not errors:
            logger.debug(f"{record_type} is valid")
            return None

        logger.debug(f"{record_type} failed validation", extra={"error_count": len(errors)})
        return errors

    def check(self, record: Any) -> None:
        """
        Validate a record and raise on failure.

        Raises:
            ValidationErrors: If any rule fails
        """
        errors = self.validate(record)
        if errors is not None:
            raise errors

    def _validate_record(self, record: Any, path: frozenset[int]) -> ValidationErrors:
        fields = describe_fields(record)
        errors = ValidationErrors()
        if not fields:
            return errors

        path = path | {id(record)}

        workers = len(fields) if self.max_workers is None else min(len(fields), self.max_workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="structval-field") as pool:
            results = list(pool.map(partial(self._validate_field, path=path), fields))

        for result in results:
            errors.merge(result)
        return errors

    def _validate_field(self, field: FieldDescriptor, path: frozenset[int]) -> ValidationErrors:
        errors = ValidationErrors()

        for invocation in parse_rule_spec(field.rules):
            self._apply_rule(field, invocation, errors)

        if field.json_name:
            logger.debug(f"JSON name for {field.name}: {field.json_name}")

        if field.kind is FieldKind.RECORD:
            if id(field.value) in path:
                logger.debug(f"Not descending into {field.name}: record is already on the path")
            else:
                errors.merge(self._validate_record(field.value, path).with_prefix(field.name))

        return errors

    def _apply_rule(self, field: FieldDescriptor, invocation: RuleInvocation, errors: ValidationErrors) -> None:
        builder = self._builders.get(invocation.name)
        if builder is None:
            self._apply_custom_rule(field, invocation, errors)
            return

        validator = builder(field, invocation.options, errors)
        if validator is None:
            return

        try:
            validator.validate(field)
        except RuleViolation as e:
            errors.append(FieldError(field=field.name, rule=e.rule_name, message=e.message))

    def _apply_custom_rule(self, field: FieldDescriptor, invocation: RuleInvocation, errors: ValidationErrors) -> None:
        with self._lock:
            func = self._custom_rules.get(invocation.name)

        if func is None:
            if self.strict_rules:
                errors.append(
                    FieldError(
                        field=field.name,
                        rule=invocation.name,
                        message=f"has unknown validation rule: {invocation.name}",
                    )
                )
            else:
                logger.debug(f"Ignoring unknown rule '{invocation.name}' on {field.name}")
            return

        try:
            func(field, invocation.options)
        except RuleViolation as e:
            errors.append(FieldError(field=field.name, rule=invocation.name, message=e.message))
        except RuleConfigError as e:
            errors.append(FieldError(field=field.name, rule=invocation.name, message=f"has {e}"))

    # =======================
    # RULE BUILDERS
    # =======================

    def _build_required(self, field: FieldDescriptor, options: str, errors: ValidationErrors) -> BaseValidator:
        return RequiredValidator(field.name)

    def _build_email(self, field: FieldDescriptor, options: str, errors: ValidationErrors) -> BaseValidator:
        return EmailValidator(field.name)

    def _build_min_length(self, field: FieldDescriptor, options: str, errors: ValidationErrors) -> BaseValidator | None:
        length = self._parse_length(field, "min_length", options, errors)
        if length is None:
            return None
        return MinLengthValidator(field.name, {"length": length})

    def _build_max_length(self, field: FieldDescriptor, options: str, errors: ValidationErrors) -> BaseValidator | None:
        length = self._parse_length(field, "max_length", options, errors)
        if length is None:
            return None
        return MaxLengthValidator(field.name, {"length": length})

    def _build_password(self, field: FieldDescriptor, options: str, errors: ValidationErrors) -> BaseValidator:
        try:
            policy = resolve_password_policy(options, self.get_custom_password_rules())
        except PasswordOptionsError as e:
            errors.append(FieldError(field=field.name, rule="password", message=f"has {e}"))
            policy = e.fallback
        return PasswordValidator(field.name, {"policy": policy})

    @staticmethod
    def _parse_length(field: FieldDescriptor, rule: str, options: str, errors: ValidationErrors) -> int | None:
        try:
            return parse_int_option(rule, options)
        except RuleConfigError as e:
            errors.append(FieldError(field=field.name, rule=rule, message=f"has {e}"))
            return None
