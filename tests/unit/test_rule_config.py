"""
Unit tests for validator configuration loading.
"""

import pytest

from structval.core.models import PasswordPolicy
from structval.core.rules import ValidatorConfig, ValidatorConfigLoader
from structval.core.validator import Validator


class TestValidatorConfigLoader:
    """Tests for ValidatorConfigLoader"""

    def test_load_full_config(self, write_config):
        """Test every setting is read"""
        path = write_config(
            "validator:\n"
            "  strict_rules: true\n"
            "  max_workers: 4\n"
            "  label_record_type: true\n"
            "  password:\n"
            "    min_length: 10\n"
            "    require_special_chars: false\n"
        )

        config = ValidatorConfigLoader(path).load()

        assert config.strict_rules is True
        assert config.max_workers == 4
        assert config.label_record_type is True
        assert config.password == PasswordPolicy(min_length=10, require_special_chars=False)

    def test_empty_section_uses_defaults(self, write_config):
        """Test an empty validator section"""
        config = ValidatorConfigLoader(write_config("validator:\n")).load()

        assert config == ValidatorConfig()

    def test_missing_file_raises(self, tmp_path):
        """Test a missing file fails at construction"""
        with pytest.raises(FileNotFoundError):
            ValidatorConfigLoader(tmp_path / "absent.yaml")

    def test_missing_section_raises(self, write_config):
        """Test the validator section is mandatory"""
        with pytest.raises(ValueError, match="'validator' section"):
            ValidatorConfigLoader(write_config("rules: {}\n")).load()

    def test_invalid_values_raise(self, write_config):
        """Test pydantic errors surface as ValueError"""
        path = write_config("validator:\n  password:\n    min_length: -1\n")

        with pytest.raises(ValueError, match="Invalid validator configuration"):
            ValidatorConfigLoader(path).load()

    def test_invalid_yaml_raises(self, write_config):
        """Test unparseable YAML surfaces as ValueError"""
        with pytest.raises(ValueError, match="Invalid YAML"):
            ValidatorConfigLoader(write_config("validator: [unclosed\n")).load()


class TestValidatorFromConfig:
    """Tests for Validator.from_config"""

    def test_settings_are_applied(self):
        """Test config values land on the validator"""
        policy = PasswordPolicy(min_length=4)
        config = ValidatorConfig(password=policy, strict_rules=True, max_workers=2, label_record_type=True)
        validator = Validator.from_config(config)

        assert validator.strict_rules is True
        assert validator.max_workers == 2
        assert validator.label_record_type is True
        assert validator.get_custom_password_rules() == policy

    def test_no_password_keeps_default(self):
        """Test an absent password section sets no custom policy"""
        assert Validator.from_config(ValidatorConfig()).get_custom_password_rules() is None
