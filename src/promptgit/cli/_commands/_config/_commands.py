# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: A002
"""Read-only configuration commands."""

from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter

from promptgit.cli._commands._shared import (
    ExitCode,
    exit_with_error,
    format_json,
    format_plain,
    format_table,
    format_toml,
)
from promptgit.cli._context import CLIContext, OutputFormat
from promptgit.config import ConfigLoadError, discover_sources, generate_sample_config

from ._app import app

if TYPE_CHECKING:
    from promptgit.config import ConfigSource

_MISSING = object()


def _source_path(source: "ConfigSource") -> str | None:  # noqa: UP037
    return str(source.path) if source.path is not None else None


@app.command(name="show")
def _show(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="toml or json"),
    ] = OutputFormat.TOML,
) -> None:
    """Print the effective configuration, every source merged.

    Args:
        format: toml or json.
    """
    data = CLIContext.get_current().config.to_dict()
    rendered = format_json(data) if format is OutputFormat.JSON else format_toml(data)
    print(rendered.rstrip())
    raise SystemExit(ExitCode.SUCCESS)


@app.command(name="get")
def _get(key: str, /) -> None:
    """Print one value, addressed by dotted key such as ``git.backend``.

    Tables print as ``key=value`` lines. An unknown key exits with status 3.

    Args:
        key: Dotted configuration key.
    """
    value = CLIContext.get_current().config.get(key, _MISSING)
    if value is _MISSING:
        exit_with_error(f"Unknown configuration key: {key}", ExitCode.NOT_FOUND)
    print(format_plain(value, key if isinstance(value, dict) else ""))
    raise SystemExit(ExitCode.SUCCESS)


@app.command(name="sample")
def _sample() -> None:
    """Print a commented sample file holding every default."""
    print(generate_sample_config().rstrip())
    raise SystemExit(ExitCode.SUCCESS)


@app.command(name="sources")
def _sources(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="table, json or plain"),
    ] = OutputFormat.TABLE,
) -> None:
    """List where configuration is read from, highest precedence first.

    File locations are listed even when nothing exists there yet.

    Args:
        format: table, json or plain.
    """
    try:
        sources = discover_sources(include_cli=False)
    except (ConfigLoadError, OSError) as e:
        exit_with_error(
            f"Cannot discover configuration sources: {e}", ExitCode.LOAD_ERROR
        )

    match format:
        case OutputFormat.JSON:
            entries = [
                {
                    "name": source.name.value,
                    "path": _source_path(source),
                    "exists": source.exists,
                }
                for source in sources
            ]
            print(format_json({"sources": entries}))
        case OutputFormat.PLAIN:
            for source in sources:
                missing = "" if source.exists else " (not found)"
                where = _source_path(source) or "(no path)"
                print(f"{source.name.value}: {where}{missing}")
        case _:
            rows = [
                [
                    source.name.value,
                    _source_path(source) or "-",
                    "yes" if source.exists else "no",
                ]
                for source in sources
            ]
            print(format_table(["Source", "Path", "Exists"], rows).rstrip())

    raise SystemExit(ExitCode.SUCCESS)
