# pyright: reportUnusedCallResult=false
# ruff: noqa: A002, TC003  # Path needed at runtime for cyclopts parameter parsing
"""Git status commands: the prompt fragment and the raw info behind it."""

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from promptgit.cli._context import CLIContext, OutputFormat
from promptgit.git import GitInfo, GitStatusService, create_backend, format_git_status
from promptgit.symbols import resolve_symbols
from promptgit.utils import FileCache, resolve_cache_dir

from ._shared import (
    ExitCode,
    exit_with_error,
    format_json,
    format_plain,
    format_table,
)


def build_service(ctx: CLIContext) -> GitStatusService:
    """Build a status service from the loaded configuration.

    The branch cache lives in the configured cache directory so it persists
    between prompt renders.
    """
    config = ctx.config
    cache = FileCache(resolve_cache_dir(config.cache.dir), logger=ctx.logger)
    backend = create_backend(config.git, logger=ctx.logger)
    return GitStatusService(backend, cache, config=config.git, logger=ctx.logger)


def _git_info(directory: Path | None) -> GitInfo | None:
    ctx = CLIContext.get_current()
    target = directory if directory is not None else Path.cwd()
    info = build_service(ctx).get_git_info(target)
    if ctx.logger:
        ctx.logger.debug("git_info", directory=str(target), found=info is not None)
    return info


def status(
    directory: Annotated[
        Path | None, Parameter(help="Directory to inspect (default: cwd)")
    ] = None,
    /,
) -> None:
    """Print the git fragment of the prompt

    Prints `` <git> <branch> [<indicators>]`` without a trailing newline, or
    nothing when the directory is not in a repository or git status is
    disabled. Always exits 0 so a prompt never breaks.

    Args:
        directory: Directory to inspect (default: current directory).
    """
    info = _git_info(directory)
    if info is not None:
        symbols = resolve_symbols(CLIContext.get_current().config)
        print(format_git_status(info, symbols), end="")  # noqa: T201
    raise SystemExit(ExitCode.SUCCESS)


def info(
    directory: Annotated[
        Path | None, Parameter(help="Directory to inspect (default: cwd)")
    ] = None,
    /,
    *,
    format: Annotated[
        OutputFormat,
        Parameter(
            name=["--format", "-f"],
            help="Output format (json, table, plain)",
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the branch and indicator counts

    Exits 3 when there is no git information for the directory.

    Args:
        directory: Directory to inspect (default: current directory).
        format: Output format (json, table, plain).
    """
    git_info = _git_info(directory)
    if git_info is None:
        exit_with_error("No git information available", ExitCode.NOT_FOUND)

    match format:
        case OutputFormat.JSON:
            output = format_json(git_info.to_dict())
        case OutputFormat.PLAIN:
            output = format_plain(git_info.to_dict())
        case _:
            rows = [["branch", git_info.branch]]
            rows.extend(
                [name, format_plain(value)]
                for name, value in git_info.indicators.to_dict().items()
            )
            output = format_table(["Field", "Value"], rows)

    print(output.rstrip())  # noqa: T201
    raise SystemExit(ExitCode.SUCCESS)
