"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. Explicit arguments (CLI options)
2. Environment variables (CASELESS_*)
3. Config file (~/.caseless/config.toml)
4. Default values

Environment variables:
- CASELESS_CONFIG_PATH: Path to config file (overrides default location)
- CASELESS_CASE_FOLDING_FILE: CaseFolding.txt to build the fold table from
- CASELESS_LOG_LEVEL: debug, info, warning or error
- CASELESS_LOG_FORMAT: text or json
- CASELESS_LOG_FILE: Write logs to this file instead of stderr

Config file layout:

    [caseless]
    case_folding_file = "/usr/share/unicode/CaseFolding.txt"

    [logging]
    level = "info"
    format = "json"
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from caseless.config.env import EnvReader
from caseless.config.models import CaselessConfig, LoggingConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".caseless"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the config file path.

    Can be overridden by the CASELESS_CONFIG_PATH environment variable.

    Args:
        env: Optional environment mapping (defaults to os.environ).

    Returns:
        Path to config file.
    """
    env_path = EnvReader(env).get_path("CASELESS_CONFIG_PATH", must_exist=False)
    return env_path if env_path is not None else DEFAULT_CONFIG_FILE


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        path: Path to config file. If None, uses default location.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist
        or cannot be parsed.
    """
    if path is None:
        path = get_default_config_path()

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}
    logger.debug("Loaded config from %s", path)
    return config


def _file_path(section: Mapping[str, Any], key: str) -> Path | None:
    value = section.get(key)
    return Path(value).expanduser() if value else None


def get_case_folding_file(
    config_path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> Path | None:
    """Resolve only the CaseFolding.txt setting.

    Reads CASELESS_CASE_FOLDING_FILE and the [caseless] section of the
    config file. Logging settings are not read, so an invalid logging
    value cannot stop the fold table from loading.

    Args:
        config_path: Path to config file (overrides CASELESS_CONFIG_PATH).
        env: Optional environment mapping (defaults to os.environ).

    Returns:
        Path to the data file, or None to use the interpreter tables.
    """
    if config_path is None:
        config_path = get_default_config_path(env)
    caseless_file = load_config_file(config_path).get("caseless", {})
    return EnvReader(env).get_path("CASELESS_CASE_FOLDING_FILE") or _file_path(
        caseless_file, "case_folding_file"
    )


def get_config(
    config_path: Path | None = None,
    *,
    case_folding_file: Path | None = None,
    log_level: str | None = None,
    log_format: str | None = None,
    log_file: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> CaselessConfig:
    """Get configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides CASELESS_CONFIG_PATH).
        case_folding_file: Override for the CaseFolding.txt path.
        log_level: Override log level.
        log_format: Override log format ("text" or "json").
        log_file: Override log file path.
        env: Optional environment mapping (defaults to os.environ).

    Returns:
        CaselessConfig with merged configuration.

    Raises:
        ConfigError: If a merged value is invalid.
    """
    reader = EnvReader(env)
    if config_path is None:
        config_path = get_default_config_path(env)
    file_config = load_config_file(config_path)
    caseless_file = file_config.get("caseless", {})
    logging_file = file_config.get("logging", {})

    logging_config = LoggingConfig(
        level=(
            log_level
            or reader.get_str("CASELESS_LOG_LEVEL")
            or logging_file.get("level")
            or LoggingConfig.level
        ),
        format=(
            log_format
            or reader.get_str("CASELESS_LOG_FORMAT")
            or logging_file.get("format")
            or LoggingConfig.format
        ),
        file=(
            log_file
            or reader.get_path("CASELESS_LOG_FILE", must_exist=False)
            or _file_path(logging_file, "file")
        ),
    )

    return CaselessConfig(
        case_folding_file=(
            case_folding_file
            or reader.get_path("CASELESS_CASE_FOLDING_FILE")
            or _file_path(caseless_file, "case_folding_file")
        ),
        logging=logging_config,
    )
