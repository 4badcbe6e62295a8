"""Configuration loader for grafana_metrics.

Reads defaults, `.configs` (environment variables format) and OS environment variables (env wins).
"""
import logging
import os
from typing import Optional

from .exceptions import ValidationError
from .models import MetricType


class Config:
    def __init__(self, config_file: Optional[str] = None):
        # defaults
        self.LOG_LEVEL = "INFO"
        self.DEFAULT_METRIC_TYPE = MetricType.GAUGE.value
        self.REJECT_NON_FINITE = False

        # load file if provided (environment variables format: KEY=VALUE)
        cfg_path = config_file or os.getenv("CONFIG_FILE") or os.path.join(os.getcwd(), ".configs")
        if cfg_path and os.path.isfile(cfg_path):
            try:
                with open(cfg_path, "r") as f:
                    for line in f:
                        line = line.strip()
                        # skip empty lines and comments
                        if not line or line.startswith('#'):
                            continue
                        if '=' in line:
                            key, value = line.split('=', 1)
                            key = key.strip()
                            value = value.strip()
                            if hasattr(self, key):
                                setattr(self, key, value)
            except OSError as e:
                raise ValidationError(f"Failed to read config file {cfg_path}: {e}")

        # environment overrides
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", self.LOG_LEVEL).upper()
        self.DEFAULT_METRIC_TYPE = os.getenv("DEFAULT_METRIC_TYPE", self.DEFAULT_METRIC_TYPE)
        self.REJECT_NON_FINITE = os.getenv("REJECT_NON_FINITE", str(self.REJECT_NON_FINITE)).lower() == "true"

    @property
    def log_level(self) -> int:
        # unknown names fall back to INFO
        level = getattr(logging, self.LOG_LEVEL, logging.INFO)
        return level if isinstance(level, int) else logging.INFO

    @property
    def default_metric_type(self) -> MetricType:
        return MetricType.parse(self.DEFAULT_METRIC_TYPE)

    def validate(self) -> None:
        # raises InvalidMetricTypeError for unknown names
        MetricType.parse(self.DEFAULT_METRIC_TYPE)
        logging.getLogger("grafana_metrics").debug(
            f"Config validated (LOG_LEVEL={self.LOG_LEVEL}, DEFAULT_METRIC_TYPE={self.DEFAULT_METRIC_TYPE}, "
            f"REJECT_NON_FINITE={self.REJECT_NON_FINITE})"
        )
