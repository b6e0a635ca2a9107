"""Per-invocation CLI state shared with commands."""

from contextvars import ContextVar
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from promptgit.config import Config

if TYPE_CHECKING:
    from contextvars import Token

    from structlog.typing import FilteringBoundLogger


class OutputFormat(StrEnum):
    """Output formats accepted by ``--format``."""

    TOML = "toml"
    JSON = "json"
    TABLE = "table"
    PLAIN = "plain"


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the global options resolved to.

    The meta command sets it before dispatching; commands read it with
    ``get_current``.

    Attributes:
        config: Effective configuration.
        verbose: Whether ``--verbose`` was given.
        config_error: Why loading fell back to defaults, if it did.
        logger: File logger, or None when the log file cannot be opened.
    """

    config: Config = field(repr=False)
    verbose: bool = False
    config_error: str | None = None
    logger: "FilteringBoundLogger | None" = field(default=None, repr=False)  # noqa: UP037

    @classmethod
    def get_current(cls) -> "CLIContext":  # noqa: UP037
        """Return the active context, or one with default settings."""
        ctx = _active.get()
        return ctx if ctx is not None else cls(config=Config())

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> "Token[CLIContext | None]":  # noqa: UP037
        """Make ``ctx`` the active context.

        Returns:
            Token that restores the previous context when passed to reset.
        """
        return _active.set(ctx)

    @classmethod
    def reset(cls, token: "Token[CLIContext | None] | None" = None) -> None:  # noqa: UP037
        """Restore the context before ``token``, or clear it."""
        if token is not None:
            _active.reset(token)
        else:
            _ = _active.set(None)


_active: ContextVar[CLIContext | None] = ContextVar("promptgit_cli", default=None)
