"""Pydantic models for each configuration section and the root Config."""

from promptgit.config._models._cache import CacheConfiguration
from promptgit.config._models._common import ConfigSource, ConfigSourceName
from promptgit.config._models._config import Config
from promptgit.config._models._git import GitBackendName, GitConfiguration
from promptgit.config._models._logging import LogFormat, LoggingConfig, LogLevel
from promptgit.config._models._symbols import (
    ASCII_SYMBOLS,
    NERD_FONT_SYMBOLS,
    DisplayConfiguration,
    SymbolConfig,
)

__all__ = [
    "ASCII_SYMBOLS",
    "NERD_FONT_SYMBOLS",
    "CacheConfiguration",
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "DisplayConfiguration",
    "GitBackendName",
    "GitConfiguration",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SymbolConfig",
]
