"""Shared utilities: command execution, caching, logging, and paths."""

from ._cache import Cache, CacheStats, FileCache, MemoryCache, utc_timestamp
from ._exec import (
    DEFAULT_TIMEOUT_MS,
    CommandConfig,
    CommandResult,
    run_command,
    truncate_output,
)
from ._logging import create_cli_logger, create_logger, resolve_log_level
from ._paths import (
    get_cli_log_file,
    get_default_cache_dir,
    get_user_config_file,
    resolve_cache_dir,
)

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "Cache",
    "CacheStats",
    "CommandConfig",
    "CommandResult",
    "FileCache",
    "MemoryCache",
    "create_cli_logger",
    "create_logger",
    "get_cli_log_file",
    "get_default_cache_dir",
    "get_user_config_file",
    "resolve_cache_dir",
    "resolve_log_level",
    "run_command",
    "truncate_output",
    "utc_timestamp",
]
