"""Exceptions raised by grafana_metrics."""
from typing import Any, Iterable


class MetricsError(Exception):
    """Base class for all grafana_metrics errors."""


class ValidationError(MetricsError):
    """Raised for invalid configuration or input."""


class InvalidMetricTypeError(ValidationError):
    def __init__(self, value: Any, valid_types: Iterable[str]):
        self.value = value
        self.valid_types = tuple(valid_types)
        super().__init__(
            f"Invalid metric type: {value}. Must be one of: {', '.join(self.valid_types)}"
        )


class UndefinedMetricError(MetricsError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Metric '{name}' is not defined. Use define() first.")


class NonFiniteValueError(ValidationError):
    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(f"Metric '{name}' has non-finite value {value!r}")
