"""Metric types, definitions and per-call options."""
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .exceptions import InvalidMetricTypeError

Labels = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


class MetricType(Enum):
    GAUGE = "gauge"
    COUNTER = "counter"
    HISTOGRAM = "histogram"
    SUMMARY = "summary"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, value: Union["MetricType", str]) -> "MetricType":
        """Convert external text into a MetricType.

        Only the exact lower-case names are accepted; anything else raises
        InvalidMetricTypeError.
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        raise InvalidMetricTypeError(value, cls.values())


class MetricDefinition:
    """Help text and type registered for one metric name."""

    def __init__(self, name: str, help_text: str, metric_type: MetricType = MetricType.GAUGE):
        self.name = name
        self.help = help_text
        self.type = metric_type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetricDefinition):
            return NotImplemented
        return (self.name, self.help, self.type) == (other.name, other.help, other.type)

    def __repr__(self) -> str:
        return f"MetricDefinition(name={self.name!r}, help={self.help!r}, type={self.type.value!r})"

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "help": self.help,
            "type": self.type.value,
        }


class MetricOptions:
    """Sample data passed to the define-and-emit helpers.

    Args:
        value: The sample value, rendered with ``str()`` (booleans as ``true``/``false``).
        labels: Label pairs in output order. Defaults to no labels.
        metric_type: Type used if the metric gets (re)defined. Defaults to the
            generator's configured default type (gauge).
    """

    def __init__(
        self,
        value: Any,
        labels: Optional[Labels] = None,
        metric_type: Union[MetricType, str, None] = None,
    ):
        self.value = value
        self.labels = labels if labels is not None else {}
        self.metric_type = metric_type
