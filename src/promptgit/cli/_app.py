"""The command-line interface for promptgit."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter
from rich.console import Console

from promptgit.config import LoggingConfig, safe_load_config
from promptgit.utils import create_cli_logger

from ._commands import register_commands
from ._context import CLIContext

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def _open_log(
    settings: LoggingConfig, *, verbose: bool
) -> "FilteringBoundLogger | None":  # noqa: UP037
    level = "debug" if verbose else settings.level.value
    try:
        return create_cli_logger(
            level=level,
            log_format=settings.format.value,  # type: ignore[arg-type]
            log_file=settings.file,
        )
    except OSError:
        # Unwritable log location: run without a log
        return None


def _overrides(*, verbose: bool, ascii_only: bool) -> dict[str, object] | None:
    overrides: dict[str, object] = {}
    if verbose:
        overrides["logging"] = {"level": "debug"}
    if ascii_only:
        overrides["display"] = {"no_emoji": True}
    return overrides or None


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Build the ``promptgit`` application with every command registered.

    Args:
        console: Console for command output.
        error_console: Console for cyclopts parse errors.
        exit_on_error: Exit on parse errors instead of raising.
    """
    app = App(
        name="promptgit",
        help="Git status indicators for shell prompts.",
        help_on_error=True,
        console=console or Console(),
        error_console=error_console or Console(stderr=True),
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _launcher(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Log at debug level")] = False,
        ascii_only: Annotated[
            bool, Parameter(name="--ascii", help="Use ASCII indicator symbols")
        ] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Read only this file")
        ] = None,
    ) -> None:
        """Load configuration, open the log, then dispatch to a command.

        Args:
            tokens: Subcommand and its arguments.
            verbose: Log at debug level.
            ascii_only: Same as ``display.no_emoji = true``.
            config: Config file used instead of discovery.
        """
        loaded, load_error = safe_load_config(
            config_path=config,
            cli_overrides=_overrides(verbose=verbose, ascii_only=ascii_only),
        )
        token = CLIContext.set_current(
            CLIContext(
                config=loaded,
                verbose=verbose,
                config_error=load_error,
                logger=_open_log(loaded.logging, verbose=verbose),
            )
        )
        try:
            app(tokens)
        finally:
            CLIContext.reset(token)

    register_commands(app)
    return app


def main() -> None:
    """Entry point of the ``promptgit`` script."""
    create_app().meta()


if __name__ == "__main__":
    main()
