# ruff: noqa: TC003  # Path needed at runtime for Protocol method signatures
"""Git query backend protocol.

The status core never runs git itself; it asks a backend. Every method may
raise GitQueryError independently of the others, and callers decide which
failures are fatal.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from promptgit.git._models import BranchListing


@runtime_checkable
class GitBackend(Protocol):
    """Protocol for git query backends."""

    def is_repository(self, directory: Path, *, timeout_ms: int | None = None) -> bool:
        """Check whether ``directory`` is inside a git working tree or git dir.

        Args:
            directory: Directory to check.
            timeout_ms: Timeout for this query. None uses the backend default.

        Returns:
            True if the directory belongs to a repository.
        """
        ...

    def show_current_branch(self, directory: Path) -> str:
        """Return raw ``git branch --show-current`` output."""
        ...

    def abbrev_ref_head(self, directory: Path) -> str:
        """Return raw ``git rev-parse --abbrev-ref HEAD`` output."""
        ...

    def list_branches(self, directory: Path) -> BranchListing:
        """List local branches, marking the checked-out one."""
        ...

    def status_porcelain(self, directory: Path) -> str:
        """Return raw ``git status --porcelain`` output."""
        ...

    def stash_list(self, directory: Path) -> str:
        """Return raw ``git stash list`` output, one entry per line."""
        ...

    def upstream_ref(self, directory: Path) -> str:
        """Return the upstream ref name of the current branch."""
        ...

    def rev_list_left_right(self, directory: Path) -> str:
        """Return ``<behind>\\t<ahead>`` counts of upstream versus HEAD."""
        ...
