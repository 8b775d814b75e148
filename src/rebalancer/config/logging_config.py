"""Logging configuration."""

import logging
import sys
from typing import Optional

from rebalancer.config.settings import get_settings
from rebalancer.core.exceptions import ValidationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure application logging.

    The level defaults to Settings.log_level. It is set on the rebalancer
    package logger as well, so solver and file messages follow it even when
    the root logger was configured by the host process.
    """
    level_name = (level or get_settings().log_level).upper()
    if level_name not in LOG_LEVELS:
        raise ValidationError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=level_name,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("rebalancer").setLevel(level_name)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)
