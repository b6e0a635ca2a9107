"""Git status result types.

GitIndicators and GitInfo are built once per status query and never mutated;
every computation starts from EMPTY_INDICATORS and derives copies.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import NamedTuple, Self


class AheadBehind(NamedTuple):
    """Commit counts relative to the upstream tracking ref."""

    ahead: int = 0
    behind: int = 0


@dataclass(frozen=True, slots=True)
class GitIndicators:
    """Counts summarizing a working tree for prompt display.

    Attributes:
        stashed: Number of stash entries.
        staged: Files with staged additions, modifications, or copies.
        modified: Files modified in the working tree but not staged.
        untracked: Files not tracked by git.
        renamed: Renames, staged or unstaged.
        deleted: Deletions, staged or unstaged.
        conflicts: Files with unresolved merge conflicts.
        ahead: Commits in HEAD not in the upstream.
        behind: Commits in the upstream not in HEAD.
        diverged: Whether both ahead and behind are nonzero.

    Raises:
        ValueError: If a count is negative or ``diverged`` disagrees with
            ``ahead`` and ``behind``.
    """

    stashed: int = 0
    staged: int = 0
    modified: int = 0
    untracked: int = 0
    renamed: int = 0
    deleted: int = 0
    conflicts: int = 0
    ahead: int = 0
    behind: int = 0
    diverged: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name != "diverged" and getattr(self, f.name) < 0:
                msg = f"{f.name} must be non-negative, got {getattr(self, f.name)}"
                raise ValueError(msg)
        if self.diverged != (self.ahead > 0 and self.behind > 0):
            msg = (
                f"diverged={self.diverged} is inconsistent with "
                f"ahead={self.ahead}, behind={self.behind}"
            )
            raise ValueError(msg)

    def with_ahead_behind(self, ahead: int, behind: int) -> Self:
        """Return a copy with ahead/behind set and divergence derived."""
        return replace(
            self, ahead=ahead, behind=behind, diverged=ahead > 0 and behind > 0
        )

    def with_stashed(self, stashed: int) -> Self:
        """Return a copy with the stash count set."""
        return replace(self, stashed=stashed)

    @property
    def is_clean(self) -> bool:
        """Whether every count is zero."""
        return self == EMPTY_INDICATORS

    def to_dict(self) -> dict[str, int | bool]:
        """Return the indicators as a plain dictionary."""
        return asdict(self)


EMPTY_INDICATORS = GitIndicators()


@dataclass(frozen=True, slots=True)
class GitInfo:
    """Branch name and indicators for one directory.

    Attributes:
        branch: Current branch name, never empty.
        indicators: Working tree and upstream indicators.
    """

    branch: str
    indicators: GitIndicators = EMPTY_INDICATORS

    def __post_init__(self) -> None:
        if not self.branch:
            msg = "branch must be a non-empty string"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dictionary."""
        return {"branch": self.branch, "indicators": self.indicators.to_dict()}


@dataclass(frozen=True, slots=True)
class BranchListing:
    """Result of listing local branches.

    Attributes:
        current: Name of the checked-out branch, or None when HEAD is detached
            or the listing did not mark one.
        branches: All local branch names in listing order.
    """

    current: str | None = None
    branches: tuple[str, ...] = ()
