# ruff: noqa: TC003  # Path needed at runtime for method signatures
"""Fake git backend for testing.

This module provides a FakeGitBackend class that implements GitBackend for use
in tests without requiring git or an actual repository.
"""

from dataclasses import dataclass, field
from pathlib import Path

from promptgit.exceptions import GitQueryError
from promptgit.git._models import BranchListing

type FakeResponse = str | bool | BranchListing | Exception


@dataclass(slots=True)
class FakeGitBackend:
    """Scripted git backend.

    Each query returns the response registered under its method name. A
    registered exception is raised instead of returned. Queries without a
    registered response raise GitQueryError, like a git command that failed.
    Every call is recorded in ``calls`` as ``(method, directory)``.

    Example:
        >>> backend = FakeGitBackend(
        ...     responses={"is_repository": True, "show_current_branch": "main\\n"}
        ... )
        >>> backend.show_current_branch(Path("/repo"))
        'main\\n'
        >>> backend.calls
        [('show_current_branch', PosixPath('/repo'))]
    """

    responses: dict[str, FakeResponse] = field(default_factory=dict)
    calls: list[tuple[str, Path]] = field(default_factory=list)

    def set_response(self, method: str, response: FakeResponse) -> None:
        """Register the response for a query method."""
        self.responses[method] = response

    def called(self, method: str) -> int:
        """Return how many times a query method was called."""
        return sum(1 for name, _ in self.calls if name == method)

    def _respond(self, method: str, directory: Path) -> FakeResponse:
        self.calls.append((method, directory))
        if method not in self.responses:
            msg = f"no scripted response for {method}"
            raise GitQueryError(msg, exit_code=128)
        response = self.responses[method]
        if isinstance(response, Exception):
            raise response
        return response

    def _respond_str(self, method: str, directory: Path) -> str:
        response = self._respond(method, directory)
        if not isinstance(response, str):
            msg = f"{method} response must be a string, got {type(response).__name__}"
            raise TypeError(msg)
        return response

    def is_repository(self, directory: Path, *, timeout_ms: int | None = None) -> bool:  # noqa: ARG002
        return bool(self._respond("is_repository", directory))

    def show_current_branch(self, directory: Path) -> str:
        return self._respond_str("show_current_branch", directory)

    def abbrev_ref_head(self, directory: Path) -> str:
        return self._respond_str("abbrev_ref_head", directory)

    def list_branches(self, directory: Path) -> BranchListing:
        response = self._respond("list_branches", directory)
        if not isinstance(response, BranchListing):
            msg = "list_branches response must be a BranchListing"
            raise TypeError(msg)
        return response

    def status_porcelain(self, directory: Path) -> str:
        return self._respond_str("status_porcelain", directory)

    def stash_list(self, directory: Path) -> str:
        return self._respond_str("stash_list", directory)

    def upstream_ref(self, directory: Path) -> str:
        return self._respond_str("upstream_ref", directory)

    def rev_list_left_right(self, directory: Path) -> str:
        return self._respond_str("rev_list_left_right", directory)
