"""
Logging and metrics for structval.
"""

from .logger import get_logger, log_operation, set_package_level, setup_logger

__all__ = [
    "get_logger",
    "setup_logger",
    "log_operation",
    "set_package_level",
]
