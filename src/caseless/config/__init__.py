"""Configuration management for caseless.

Configuration is loaded with precedence handling:
1. Explicit arguments / CLI flags (highest priority)
2. Environment variables (CASELESS_*)
3. Config file (~/.caseless/config.toml)
4. Default values (lowest priority)
"""

from caseless.config.env import EnvReader
from caseless.config.loader import (
    get_case_folding_file,
    get_config,
    get_default_config_path,
    load_config_file,
)
from caseless.config.models import CaselessConfig, LoggingConfig

__all__ = [
    "CaselessConfig",
    "EnvReader",
    "LoggingConfig",
    "get_case_folding_file",
    "get_config",
    "get_default_config_path",
    "load_config_file",
]
