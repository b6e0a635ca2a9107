# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: A002
"""Cache maintenance commands."""

from typing import Annotated

from cyclopts import Parameter

from promptgit.cli._commands._shared import (
    ExitCode,
    exit_with_success,
    format_json,
    format_plain,
    format_table,
)
from promptgit.cli._context import CLIContext, OutputFormat
from promptgit.utils import FileCache, resolve_cache_dir

from ._app import app


def _open_cache() -> FileCache:
    ctx = CLIContext.get_current()
    return FileCache(resolve_cache_dir(ctx.config.cache.dir), logger=ctx.logger)


@app.command(name="stats")
def _stats(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(
            name=["--format", "-f"],
            help="Output format (table, json, plain)",
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show cache location, entry count, and size

    Args:
        format: Output format (table, json, plain).
    """
    cache = _open_cache()
    stats = cache.stats()
    data = {
        "directory": str(cache.directory),
        "entries": stats.total,
        "size": stats.size,
    }

    match format:
        case OutputFormat.JSON:
            output = format_json(data)
        case OutputFormat.PLAIN:
            output = format_plain(data)
        case _:
            output = format_table(
                ["Directory", "Entries", "Size (bytes)"],
                [[data["directory"], str(stats.total), str(stats.size)]],
            )

    print(output.rstrip())
    raise SystemExit(ExitCode.SUCCESS)


@app.command(name="clear")
def _clear() -> None:
    """Remove every cache entry"""
    cache = _open_cache()
    cleared = cache.clear()
    ctx = CLIContext.get_current()
    if ctx.logger:
        ctx.logger.info("cache_cleared", directory=str(cache.directory), count=cleared)
    exit_with_success(f"Cleared {cleared} entries from {cache.directory}")
