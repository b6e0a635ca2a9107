"""Platform locations for promptgit configuration, cache, and logs."""

from pathlib import Path

import platformdirs

APP_NAME = "promptgit"


def get_user_config_dir() -> Path:
    """Get the platform-specific promptgit configuration directory."""
    return platformdirs.user_config_path(APP_NAME)


def get_user_config_file() -> Path:
    """Get the path to the user configuration file."""
    return get_user_config_dir() / "config.toml"


def get_default_cache_dir() -> Path:
    """Get the platform-specific cache directory used when none is configured."""
    return platformdirs.user_cache_path(APP_NAME)


def get_log_dir() -> Path:
    """Get the platform-specific log directory."""
    return platformdirs.user_log_path(APP_NAME)


def get_cli_log_file() -> Path:
    """Get the path to the default CLI log file."""
    return get_log_dir() / "promptgit.log"


def resolve_cache_dir(configured: str) -> Path:
    """Resolve the cache directory from a configured value.

    Args:
        configured: Configured directory; empty selects the platform default.
            A leading ``~`` is expanded.

    Returns:
        The cache directory path (not created).
    """
    if not configured:
        return get_default_cache_dir()
    return Path(configured).expanduser()
