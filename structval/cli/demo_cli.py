"""
Command-line demonstration of the validator.

Usage:
    python -m structval.cli.demo_cli [--config <validator.yaml>] [--log-level DEBUG]
"""

import argparse
import sys
from dataclasses import dataclass

from structval.core.models import PasswordPolicy
from structval.core.rules import ValidatorConfig, ValidatorConfigLoader
from structval.core.schema import validated_field
from structval.core.validator import Validator
from structval.observability.logger import get_logger, log_operation, set_package_level


@dataclass
class User:
    username: str = validated_field("required,min_length=3,max_length=10", json="username")
    email: str = validated_field("required,email", json="email")
    password: str = validated_field("required,password", json="password")


@dataclass
class Address:
    city: str = validated_field("required")
    state: str = validated_field("required")


@dataclass
class Profile:
    name: str = validated_field("required")
    address: Address = validated_field("required")


def _report(label: str, validator: Validator, record) -> None:
    errors = validator.validate(record)
    if errors is None:
        print(f"{label}: valid")
    else:
        print(f"{label}: invalid")
        for message in errors.messages():
            print(f"  - {message}")


def demo_command(args) -> None:
    """
    Run the sample scenarios against one validator.

    Args:
        args: Command-line arguments
    """
    logger = get_logger(__name__)

    config = ValidatorConfigLoader(args.config).load() if args.config else ValidatorConfig()
    validator = Validator.from_config(config)

    with log_operation("Running validation demo", logger=logger):
        valid_user = User(username="codestack", email="user@example.com", password="Password123@#12")
        _report("Valid user", validator, valid_user)

        invalid_user = User(username="short", email="invalid-email", password="weak")
        _report("Invalid user", validator, invalid_user)

        validator.set_custom_password_rules(
            PasswordPolicy(
                min_length=0,
                require_digits=False,
                require_uppercase=False,
                require_lowercase=False,
                require_special_chars=False,
            )
        )
        _report("Invalid user with relaxed password rules", validator, invalid_user)

        profile = Profile(name="John Doe", address=Address(city="", state="New York"))
        _report("Profile with nested address", validator, profile)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Struct validation demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--config",
        help="Path to validator YAML configuration"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL env or INFO)"
    )

    args = parser.parse_args()

    if args.log_level:
        set_package_level(args.log_level)

    try:
        demo_command(args)
    except (FileNotFoundError, ValueError) as e:
        get_logger(__name__).error(f"Configuration error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
