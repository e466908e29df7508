"""
Validator configuration management.

Loads validator settings (custom password policy, strict rule names, worker
limits) from YAML files.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from structval.core.models import PasswordPolicy


class ValidatorConfig(BaseModel):
    """
    Settings for a Validator instance.

    Attributes:
        password: Validator-scoped password policy (None keeps the default)
        strict_rules: Report unknown rule names instead of ignoring them
        max_workers: Upper bound on concurrent field tasks per record level
        label_record_type: Label metrics with record class names (unbounded per class)
    """

    password: PasswordPolicy | None = None
    strict_rules: bool = False
    max_workers: int | None = Field(None, ge=1)
    label_record_type: bool = False


class ValidatorConfigLoader:
    """
    Loads validator settings from YAML configuration files.

    Expected YAML format:
    ```yaml
    validator:
      strict_rules: false
      max_workers: 8
      label_record_type: false
      password:
        min_length: 10
        require_digits: true
        require_uppercase: true
        require_lowercase: true
        require_special_chars: false
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Validator configuration file not found: {config_path}")

    def load(self) -> ValidatorConfig:
        """
        Load and parse validator settings from the YAML file.

        Returns:
            ValidatorConfig

        Raises:
            ValueError: If YAML is invalid or the 'validator' section is malformed
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "validator" not in config:
            raise ValueError("Configuration file must contain 'validator' section")

        return self._parse_section(config["validator"] or {})

    def _parse_section(self, section: Any) -> ValidatorConfig:
        if not isinstance(section, dict):
            raise ValueError("'validator' section must be a mapping")

        try:
            return ValidatorConfig.model_validate(section)
        except ValidationError as e:
            raise ValueError(f"Invalid validator configuration: {e}") from e
