"""
Prometheus metrics collection for structval

This module provides metrics instrumentation for monitoring
validation volume, rule failures, and validation latency.
"""
from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()

# record_type value used unless a Validator opts in to per-class labels.
# Per-class labels add one series per validated class, so only enable them
# when the set of record classes is bounded.
UNLABELED_RECORD_TYPE = "record"


# =======================
# VALIDATION METRICS
# =======================

# Validate() calls counter
validations_total = Counter(
    name="structval_validations_total",
    documentation="Total number of validate calls",
    labelnames=["record_type", "outcome"],  # outcome: valid, invalid
    registry=REGISTRY,
)

# Validation duration histogram
validation_duration_seconds = Histogram(
    name="structval_validation_duration_seconds",
    documentation="Time spent validating one record in seconds",
    labelnames=["record_type"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
    registry=REGISTRY,
)

# Rule failures counter
rule_failures_total = Counter(
    name="structval_rule_failures_total",
    documentation="Total number of aggregate entries by rule",
    labelnames=["rule"],  # rule: required, email, ..., structural
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """
    Get content type for Prometheus metrics

    Returns:
        Content type string
    """
    return CONTENT_TYPE_LATEST


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds, record_type="User"):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def record_validation(record_type: str, rules: list[str]) -> None:
    """
    Record the outcome of one validate call

    Args:
        record_type: Record class name, or UNLABELED_RECORD_TYPE
        rules: Rule name of every aggregate entry (empty when valid)
    """
    outcome = "invalid" if rules else "valid"
    increment_counter(validations_total, record_type=record_type, outcome=outcome)
    for rule in rules:
        increment_counter(rule_failures_total, rule=rule)
