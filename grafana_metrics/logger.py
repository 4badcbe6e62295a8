"""Library logger: one stream handler honouring LOG_LEVEL."""
import logging
from typing import Optional

from .config import Config

LOGGER_NAME = "grafana_metrics"


def get_logger(cfg: Optional[Config] = None) -> logging.Logger:
    cfg = cfg or Config()
    cfg.validate()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(cfg.log_level)

    # small stream handler for library logs, attached once
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
        logger.addHandler(ch)

    return logger
