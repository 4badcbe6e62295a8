from .config import Config
from .exceptions import (
    InvalidMetricTypeError,
    MetricsError,
    NonFiniteValueError,
    UndefinedMetricError,
    ValidationError,
)
from .logger import get_logger
from .metrics import MetricsGenerator
from .models import MetricDefinition, MetricOptions, MetricType

__all__ = [
    "Config",
    "MetricsGenerator",
    "MetricDefinition",
    "MetricOptions",
    "MetricType",
    "get_logger",
    "MetricsError",
    "ValidationError",
    "InvalidMetricTypeError",
    "UndefinedMetricError",
    "NonFiniteValueError",
]
