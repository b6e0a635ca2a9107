"""Configuration loading for the CLI entry point."""

import os
import sys
from typing import TYPE_CHECKING, NoReturn

from promptgit.exceptions import ConfigError, ConfigLoadError

from ._models import Config

if TYPE_CHECKING:
    from pathlib import Path

STRICT_ENV_VAR = "PROMPTGIT_STRICT_CONFIG"


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)  # noqa: T201
    sys.exit(1)


def _describe(error: Exception) -> str:
    if isinstance(error, ConfigLoadError) and error.location:
        return f"{error.location}: {error}"
    return str(error)


def safe_load_config(
    *,
    config_path: "Path | None" = None,  # noqa: UP037
    start: "Path | None" = None,  # noqa: UP037
    cli_overrides: dict[str, object] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration without letting a broken file break the prompt.

    A load or validation failure prints a warning to stderr and yields the
    defaults. With PROMPTGIT_STRICT_CONFIG=1 it exits with status 1 instead.
    An explicit ``config_path`` that does not exist always exits.

    Args:
        config_path: File named by ``--config``. Only this file is read.
        start: Directory where project config discovery begins.
        cli_overrides: Values from command-line options.

    Returns:
        The configuration and the error message, None on success.
    """
    if config_path is not None and not config_path.exists():
        _fail(f"Config file not found: {config_path}")

    try:
        if config_path is not None:
            return Config.from_file(config_path, cli_overrides=cli_overrides), None
        config = Config.load(
            start=start,
            include_cli=cli_overrides is not None,
            cli_overrides=cli_overrides,
        )
    except (ConfigError, OSError) as e:
        message = _describe(e)
        if os.environ.get(STRICT_ENV_VAR) == "1":
            _fail(message)
        warning = f"Warning: Failed to load config: {message}"
        print(warning, file=sys.stderr)  # noqa: T201
        return Config(), message
    return config, None
