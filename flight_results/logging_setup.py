"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

ROOT_LOGGER_NAME = "flight_results"


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Configure and return the package logger.

    Installs a single stderr handler; calling it again only updates the
    level and format.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level {config.level!r}",
            setting_name="FLR_LOG_LEVEL",
            expected_type="DEBUG|INFO|WARNING|ERROR|CRITICAL",
        )

    log = logging.getLogger(ROOT_LOGGER_NAME)
    log.setLevel(level)
    formatter = logging.Formatter(config.format)

    handler = next(
        (h for h in log.handlers if getattr(h, "_flight_results", False)), None
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler._flight_results = True  # type: ignore[attr-defined]
        log.addHandler(handler)
    handler.setFormatter(formatter)

    return log
