"""Metric registry and Prometheus exposition buffer."""
import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from .config import Config
from .exceptions import InvalidMetricTypeError, NonFiniteValueError, UndefinedMetricError
from .formatter import format_header_lines, format_sample_line
from .logger import LOGGER_NAME
from .models import Labels, MetricDefinition, MetricOptions, MetricType
from . import validator


class MetricsGenerator:
    """Holds metric definitions and an output buffer of exposition lines.

    HELP/TYPE headers are written into the buffer at most once per metric
    until ``clear()`` is called. Definitions survive ``clear()``.

    Instances are not thread-safe; share one only behind external locking.
    """

    def __init__(self, cfg: Optional[Config] = None):
        self.cfg = cfg or Config()
        self.cfg.validate()
        # level and handlers are left to get_logger() in the application
        self.logger = logging.getLogger(LOGGER_NAME)
        self.metrics: Dict[str, MetricDefinition] = {}
        self.output: List[str] = []
        self.emitted_headers: Set[str] = set()

    def define(self, name: str, help_text: str, metric_type: Union[MetricType, str, None] = None) -> MetricDefinition:
        """Register (or overwrite) the help text and type for ``name``.

        ``metric_type`` defaults to ``cfg.DEFAULT_METRIC_TYPE`` (gauge).
        """
        if metric_type is None:
            metric_type = self.cfg.DEFAULT_METRIC_TYPE
        try:
            parsed = MetricType.parse(metric_type)
        except InvalidMetricTypeError:
            self.logger.warning(f"Rejected definition of {name}: invalid metric type {metric_type!r}")
            raise

        definition = MetricDefinition(name, help_text, parsed)
        if name in self.metrics:
            self.logger.debug(f"Overwriting definition of {name} ({parsed.value})")
        else:
            self.logger.debug(f"Defined {name} ({parsed.value})")
        self.metrics[name] = definition
        return definition

    def is_defined(self, name: str) -> bool:
        return name in self.metrics

    def get_definition(self, name: str) -> MetricDefinition:
        return self._require(name)

    def _require(self, name: str) -> MetricDefinition:
        definition = self.metrics.get(name)
        if definition is None:
            self.logger.warning(f"Metric {name} used before definition")
            raise UndefinedMetricError(name)
        return definition

    def check_value(self, name: str, value: Any) -> None:
        """Raise NonFiniteValueError for NaN/Inf floats when REJECT_NON_FINITE is set."""
        if not self.cfg.REJECT_NON_FINITE:
            return
        if isinstance(value, float) and not math.isfinite(value):
            self.logger.warning(f"Rejected non-finite value {value!r} for {name}")
            raise NonFiniteValueError(name, value)

    def format_sample(self, name: str, labels: Optional[Labels], value: Any) -> str:
        """Render one sample line: ``name{k="v",...} value``."""
        self._require(name)
        self.check_value(name, value)
        return format_sample_line(name, labels, value)

    def format_with_header(self, name: str, labels: Optional[Labels], value: Any) -> str:
        """Render HELP, TYPE and sample lines without touching the buffer."""
        definition = self._require(name)
        sample = self.format_sample(name, labels, value)
        return "\n".join(format_header_lines(definition) + [sample])

    def define_and_format(self, name: str, help_text: str, options: MetricOptions) -> str:
        """Always redefine ``name`` from ``options``, then render it with headers."""
        self.define(name, help_text, options.metric_type)
        return self.format_with_header(name, options.labels, options.value)

    def append(self, name: str, labels: Optional[Labels], value: Any) -> None:
        """Add a sample to the buffer, preceded by its headers the first time."""
        definition = self._require(name)
        sample = self.format_sample(name, labels, value)
        if name not in self.emitted_headers:
            self.output.extend(format_header_lines(definition))
            self.emitted_headers.add(name)
        self.output.append(sample)

    def append_with_define(self, name: str, help_text: str, options: MetricOptions) -> None:
        """Like ``append``, defining ``name`` first only if it is unknown.

        An existing definition is kept as-is, even if ``help_text`` or
        ``options.metric_type`` differ.
        """
        if name not in self.metrics:
            self.define(name, help_text, options.metric_type)
        self.append(name, options.labels, options.value)

    def get_output(self) -> str:
        return "\n".join(self.output)

    def clear(self) -> None:
        """Empty the buffer and forget which headers were written."""
        self.logger.debug(f"Clearing {len(self.output)} buffered lines")
        self.output = []
        self.emitted_headers.clear()

    def generate_from_validator_data(
        self,
        data: Mapping[str, Any],
        chain: str,
        network: str,
        account: str,
    ) -> None:
        validator.generate_from_validator_data(self, data, chain, network, account)
