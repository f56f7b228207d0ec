"""Logging configuration for caseless.

Provides configure_logging() to set up logging based on LoggingConfig.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from caseless.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from caseless.config.models import LoggingConfig

_LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from a LoggingConfig.

    Replaces any existing root handlers with a single file or stderr
    handler using the text or JSON formatter.

    Args:
        config: Logging configuration.
    """
    level = _LEVEL_MAP.get(config.level.lower(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if config.format.lower() == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    handler: logging.Handler | None = None
    if config.file is not None:
        try:
            file_path = config.file.expanduser()
            file_path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(file_path, encoding="utf-8")
        except OSError as e:
            # Log file unavailable - fall back to stderr
            sys.stderr.write(f"Warning: Could not open log file {config.file}: {e}\n")

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    handler.setLevel(level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
