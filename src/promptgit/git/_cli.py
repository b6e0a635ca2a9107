# ruff: noqa: TC003  # Path needed at runtime for method signatures
"""Git query backend that runs the git binary."""

from pathlib import Path
from typing import TYPE_CHECKING

from promptgit.exceptions import GitQueryError
from promptgit.git._models import BranchListing
from promptgit.utils import DEFAULT_TIMEOUT_MS, CommandConfig, run_command

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

# Prompt rendering must never take the index lock or emit localized/colored text
GIT_ENV: dict[str, str] = {
    "GIT_OPTIONAL_LOCKS": "0",
    "GIT_TERMINAL_PROMPT": "0",
    "LC_ALL": "C",
}


def parse_branch_listing(output: str) -> BranchListing:
    """Parse ``git branch --no-color`` output.

    The checked-out branch is the line starting with ``* ``. A detached HEAD
    shows up as ``* (HEAD detached at ...)`` and is not reported as current.

    Args:
        output: Raw command output.

    Returns:
        Listing with the current branch and all branch names.
    """
    current: str | None = None
    branches: list[str] = []

    for line in output.splitlines():
        if len(line) < 3:
            continue
        marker, name = line[:2], line[2:].strip()
        if not name or name.startswith("("):
            continue
        branches.append(name)
        if marker == "* ":
            current = name

    return BranchListing(current=current, branches=tuple(branches))


class CliGitBackend:
    """Run git queries through the ``git`` executable.

    Non-zero exit, timeout, and a missing executable all raise GitQueryError.
    """

    _executable: str
    _timeout_ms: int
    _logger: "FilteringBoundLogger | None"  # noqa: UP037

    def __init__(
        self,
        *,
        executable: str = "git",
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the backend.

        Args:
            executable: Name or path of the git executable.
            timeout_ms: Default timeout for every query.
            logger: Optional logger for debug-level command logging.
        """
        self._executable = executable
        self._timeout_ms = timeout_ms
        self._logger = logger

    def _run(
        self, directory: Path, *args: str, timeout_ms: int | None = None
    ) -> str:
        effective_timeout = timeout_ms if timeout_ms is not None else self._timeout_ms
        result = run_command(
            CommandConfig(
                args=(self._executable, *args),
                cwd=directory,
                env=GIT_ENV,
                timeout_ms=effective_timeout,
            )
        )

        if self._logger:
            self._logger.debug(
                "git_command",
                args=args,
                directory=str(directory),
                exit_code=result.exit_code,
                timed_out=result.timed_out,
            )

        if not result.success:
            raise GitQueryError(
                result.error or "git command failed",
                args=args,
                timed_out=result.timed_out,
            )
        if result.exit_code != 0:
            msg = f"git {' '.join(args)} exited with code {result.exit_code}"
            raise GitQueryError(
                msg,
                args=args,
                exit_code=result.exit_code,
                stderr=result.stderr.strip(),
            )
        return result.stdout

    def is_repository(self, directory: Path, *, timeout_ms: int | None = None) -> bool:
        try:
            _ = self._run(directory, "rev-parse", "--git-dir", timeout_ms=timeout_ms)
        except GitQueryError as e:
            # Exit code 128 is git's "not a repository"; anything else is a failure
            if e.exit_code is not None:
                return False
            raise
        return True

    def show_current_branch(self, directory: Path) -> str:
        return self._run(directory, "branch", "--show-current")

    def abbrev_ref_head(self, directory: Path) -> str:
        return self._run(directory, "rev-parse", "--abbrev-ref", "HEAD")

    def list_branches(self, directory: Path) -> BranchListing:
        return parse_branch_listing(self._run(directory, "branch", "--no-color"))

    def status_porcelain(self, directory: Path) -> str:
        return self._run(directory, "status", "--porcelain")

    def stash_list(self, directory: Path) -> str:
        return self._run(directory, "stash", "list")

    def upstream_ref(self, directory: Path) -> str:
        return self._run(directory, "rev-parse", "--abbrev-ref", "@{u}")

    def rev_list_left_right(self, directory: Path) -> str:
        return self._run(
            directory, "rev-list", "--count", "--left-right", "@{u}...HEAD"
        )
