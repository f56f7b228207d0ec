"""Logging setup for caseless.

Provides text or JSON log output for the command line front-end.
"""

from caseless.logging.config import configure_logging
from caseless.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
