"""Configuration data models.

This module defines dataclasses for caseless configuration options.
"""

from dataclasses import dataclass, field
from pathlib import Path

from caseless.exceptions import ConfigError

VALID_LOG_LEVELS = frozenset({"debug", "info", "warning", "error"})
VALID_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for log output."""

    # Log level: debug, info, warning, error
    level: str = "warning"

    # Log format: text or json
    format: str = "text"

    # Log file path (None = stderr)
    file: Path | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.level.lower() not in VALID_LOG_LEVELS:
            raise ConfigError(
                f"log level must be one of {sorted(VALID_LOG_LEVELS)}, "
                f"got {self.level!r}"
            )
        if self.format.lower() not in VALID_LOG_FORMATS:
            raise ConfigError(
                f"log format must be one of {sorted(VALID_LOG_FORMATS)}, "
                f"got {self.format!r}"
            )


@dataclass(frozen=True)
class CaselessConfig:
    """Main configuration container."""

    case_folding_file: Path | None = None
    """CaseFolding.txt to build the fold table from.

    When None the table is derived from the interpreter's Unicode database.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
