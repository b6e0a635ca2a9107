"""promptgit configuration.

This module provides the public API for configuration management,
including loading, validation, and typed access to configuration values.

Example:
    >>> from promptgit.config import Config
    >>> config = Config.load()
    >>> config.git.disabled
    False
"""

from promptgit.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._defaults import DEFAULT_CONFIG, generate_sample_config
from ._discovery import (
    PROJECT_CONFIG_FILENAME,
    discover_sources,
    find_project_config,
    get_user_config_path,
)
from ._load import safe_load_config
from ._loader import (
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    ASCII_SYMBOLS,
    NERD_FONT_SYMBOLS,
    CacheConfiguration,
    Config,
    ConfigSource,
    ConfigSourceName,
    DisplayConfiguration,
    GitBackendName,
    GitConfiguration,
    LogFormat,
    LoggingConfig,
    LogLevel,
    SymbolConfig,
)
from ._validation import ValidationIssue, raise_if_validation_errors, validate_config

__all__ = [
    "ASCII_SYMBOLS",
    "DEFAULT_CONFIG",
    "NERD_FONT_SYMBOLS",
    "PROJECT_CONFIG_FILENAME",
    "CacheConfiguration",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "DisplayConfiguration",
    "GitBackendName",
    "GitConfiguration",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SymbolConfig",
    "ValidationIssue",
    "deep_merge",
    "discover_sources",
    "find_project_config",
    "generate_sample_config",
    "get_user_config_path",
    "parse_env_vars",
    "parse_string_value",
    "raise_if_validation_errors",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
    "validate_config",
]
