"""
Structured JSON logging for structval

This module provides consistent structured logging across the package
using python-json-logger for easy parsing and analysis.

Environment:
    STRUCTVAL_LOG_LEVEL (or LOG_LEVEL): DEBUG, INFO, WARNING, ERROR, CRITICAL
    STRUCTVAL_LOG_FORMAT: "json" (default) or "text"
"""
import logging
import os
import sys
import time

from pythonjsonlogger.json import JsonFormatter

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_LOGGER_NAME = "structval"


class CustomJsonFormatter(JsonFormatter):
    """
    JSON formatter adding timestamp, level, logger and call-site fields
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)

        if log_record.get("level"):
            log_record["level"] = log_record["level"].upper()
        else:
            log_record["level"] = record.levelname

        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName

        # Field tasks run on worker threads
        log_record["thread_name"] = record.threadName


def _env_level() -> str:
    return os.getenv("STRUCTVAL_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Setup and configure a logger

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "json" or "text" (defaults to STRUCTVAL_LOG_FORMAT or json)

    Returns:
        Configured logger instance
    """
    log_level = LOG_LEVELS.get((level or _env_level()).upper(), logging.INFO)
    format_type = format_type or os.getenv("STRUCTVAL_LOG_FORMAT", "json")

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if format_type == "json":
        formatter = CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance, configuring it on first use

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        return setup_logger(name)

    return logger


class log_operation:
    """
    Context manager for logging operation duration

    Usage:
        with log_operation("Validating users", logger=logger, count=3):
            # do work
            pass
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **extra_fields):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.extra_fields = extra_fields
        self.start_time = None

    def __enter__(self):
        self.start_time = time.time()
        self.logger.info(
            f"Starting: {self.operation_name}",
            extra={"operation": self.operation_name, **self.extra_fields}
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time

        if exc_type is None:
            self.logger.info(
                f"Completed: {self.operation_name}",
                extra={
                    "operation": self.operation_name,
                    "duration_seconds": round(duration, 3),
                    "status": "success",
                    **self.extra_fields
                }
            )
        else:
            self.logger.error(
                f"Failed: {self.operation_name}",
                extra={
                    "operation": self.operation_name,
                    "duration_seconds": round(duration, 3),
                    "status": "error",
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val),
                    **self.extra_fields
                },
                exc_info=True
            )
        return False  # Don't suppress exceptions


def set_package_level(level: str) -> None:
    """
    Reconfigure every structval logger created so far

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    names = [DEFAULT_LOGGER_NAME] + [
        name for name in logging.root.manager.loggerDict
        if name.startswith(f"{DEFAULT_LOGGER_NAME}.")
    ]
    for name in names:
        setup_logger(name, level=level)
