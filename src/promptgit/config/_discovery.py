"""Locate configuration sources.

A project file is ``promptgit.toml`` in the starting directory or its
parent. The user file lives in the platform config directory.
"""

from pathlib import Path
from typing import Any

from promptgit.utils import get_user_config_file

from ._defaults import DEFAULT_CONFIG
from ._models._common import ConfigSource, ConfigSourceName

PROJECT_CONFIG_FILENAME = "promptgit.toml"


def get_user_config_path() -> Path:
    """Return the user config file path, whether or not it exists.

    On Linux this is ``~/.config/promptgit/config.toml``.
    """
    return get_user_config_file()


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def find_project_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``promptgit.toml`` in ``start`` or its parent.

    Args:
        start: Directory to look in. Defaults to the current directory.
    """
    directory = (start or Path.cwd()).resolve()
    return next(
        (
            candidate
            for candidate in (
                directory / PROJECT_CONFIG_FILENAME,
                directory.parent / PROJECT_CONFIG_FILENAME,
            )
            if _is_file(candidate)
        ),
        None,
    )


def discover_sources(
    start: Path | None = None,
    *,
    include_env: bool = True,
    include_cli: bool = False,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """List configuration sources, highest precedence first.

    File sources carry no values yet; Config.load reads them. The user file
    is listed even when it does not exist, so ``config sources`` can show
    where to create it. A project file is listed only when found.

    Args:
        start: Directory where project discovery begins.
        include_env: List the environment as a source.
        include_cli: List command-line overrides as a source.
        cli_overrides: Values of the cli source.
    """
    sources: list[ConfigSource] = []

    if include_cli:
        sources.append(
            ConfigSource(
                ConfigSourceName.CLI,
                exists=bool(cli_overrides),
                values=cli_overrides or {},
            )
        )
    if include_env:
        sources.append(ConfigSource(ConfigSourceName.ENV))

    project = find_project_config(start)
    if project is not None:
        sources.append(ConfigSource(ConfigSourceName.PROJECT, project))

    user = get_user_config_path()
    sources.append(ConfigSource(ConfigSourceName.USER, user, exists=_is_file(user)))
    sources.append(ConfigSource(ConfigSourceName.DEFAULT, values=DEFAULT_CONFIG))
    return sources
