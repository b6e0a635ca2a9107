"""Exception types raised by promptgit.

Git query failures stay inside the git package: the status service turns
them into "no indicator" and never lets them reach the prompt.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class PromptGitError(Exception):
    """Root of every promptgit exception."""


class GitQueryError(PromptGitError):
    """A git query produced no usable answer.

    Attributes:
        git_args: Arguments passed to git, without the executable.
        exit_code: Exit status, or None when git never finished.
        stderr: Captured standard error.
        timed_out: Whether the query hit its time limit.
    """

    def __init__(
        self,
        message: str,
        *,
        args: tuple[str, ...] = (),
        exit_code: int | None = None,
        stderr: str = "",
        timed_out: bool = False,
    ) -> None:
        super().__init__(message)
        self.git_args = args
        self.exit_code = exit_code
        self.stderr = stderr
        self.timed_out = timed_out


class ConfigError(PromptGitError):
    """A configuration source could not be used."""


class ConfigLoadError(ConfigError):
    """A config file is unreadable or not valid TOML."""

    def __init__(
        self,
        message: str,
        *,
        path: "Path | None" = None,  # noqa: UP037
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.line = line
        self.column = column

    @property
    def location(self) -> str:
        """``path:line:column``, leaving out whatever is unknown."""
        parts = [str(part) for part in (self.path, self.line, self.column) if part]
        return ":".join(parts)


class ConfigValidationError(ConfigError):
    """A configuration value has the wrong type or is out of range.

    Attributes:
        key: Dotted key of the offending value.
        value: The value as supplied.
        expected: What would have been accepted.
        source: Label of the source that supplied it, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected = expected
        self.source = source
