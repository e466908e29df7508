"""
Pytest configuration and fixtures for structval tests

This module provides shared fixtures for unit and integration tests.
"""
import pytest

from structval.core.models import PasswordPolicy
from structval.core.validator import Validator


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests with no external dependencies"
    )
    config.addinivalue_line(
        "markers", "integration: Tests exercising the full validator end to end"
    )


# =======================
# VALIDATOR FIXTURES
# =======================

@pytest.fixture
def validator() -> Validator:
    """Fresh validator with no custom password policy"""
    return Validator()


@pytest.fixture
def relaxed_policy() -> PasswordPolicy:
    """Password policy with every requirement disabled"""
    return PasswordPolicy(
        min_length=0,
        require_digits=False,
        require_uppercase=False,
        require_lowercase=False,
        require_special_chars=False,
    )


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def write_config(tmp_path):
    """
    Write a YAML validator configuration to a temporary file

    Returns:
        Callable taking YAML text and returning the file path
    """
    def _write(text: str):
        path = tmp_path / "validator.yaml"
        path.write_text(text)
        return path

    return _write
