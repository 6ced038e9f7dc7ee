"""Configuration for gitcz.

This package provides:
- exceptions: ConfigError
- constants: ALLOWED_SKIP_QUESTIONS, DEFAULT_TYPES, DEFAULT_CONFIG
- models: GitczConfig, TypeValue, Messages, TicketNumberConfig, FromBranchName
- loader: load_config, parse_config, resolve_config, get_config_file, save_default_config
"""

from gitcz.config.exceptions import ConfigError
from gitcz.config.constants import (
    ALLOWED_SKIP_QUESTIONS,
    DEFAULT_CONFIG,
    DEFAULT_TYPE_DISPLAY_SIZE,
    DEFAULT_TYPES,
)
from gitcz.config.models import (
    FromBranchName,
    GitczConfig,
    Messages,
    TicketNumberConfig,
    TypeValue,
)
from gitcz.config.loader import (
    get_config_file,
    load_config,
    parse_config,
    resolve_config,
    save_default_config,
)


__all__ = [
    "ConfigError",
    "ALLOWED_SKIP_QUESTIONS",
    "DEFAULT_CONFIG",
    "DEFAULT_TYPE_DISPLAY_SIZE",
    "DEFAULT_TYPES",
    "FromBranchName",
    "GitczConfig",
    "Messages",
    "TicketNumberConfig",
    "TypeValue",
    "get_config_file",
    "load_config",
    "parse_config",
    "resolve_config",
    "save_default_config",
]
