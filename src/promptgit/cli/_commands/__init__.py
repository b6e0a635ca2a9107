"""promptgit CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._cache import app as cache_app
from ._config import app as config_app
from ._shared import (
    ExitCode,
    FormattableData,
    exit_with_error,
    exit_with_success,
    format_json,
    format_plain,
    format_table,
    format_toml,
    get_error_console,
)
from ._status import build_service, info, status

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "ExitCode",
    "FormattableData",
    "build_service",
    "cache_app",
    "config_app",
    "exit_with_error",
    "exit_with_success",
    "format_json",
    "format_plain",
    "format_table",
    "format_toml",
    "get_error_console",
    "register_commands",
]


def register_commands(app: "App") -> None:  # noqa: UP037
    app.command(status, name="status")
    app.command(info, name="info")
    app.command(cache_app)
    app.command(config_app)
