"""Git status core for shell prompts.

This module provides the public API for collecting a directory's branch and
status indicators and rendering them as a prompt fragment.

Example:
    >>> from promptgit.git import GitStatusService, create_backend
    >>> service = GitStatusService(create_backend())
    >>> service.get_git_info(".")
    GitInfo(branch='main', indicators=GitIndicators(...))
"""

from ._backend import GitBackend
from ._branch import (
    BRANCH_ATTEMPTS,
    BRANCH_CACHE_TTL_SECONDS,
    BranchResolver,
    branch_cache_key,
    clean_branch_name,
)
from ._cli import GIT_ENV, CliGitBackend, parse_branch_listing
from ._divergence import DivergenceTracker, parse_left_right
from ._dulwich import DulwichGitBackend
from ._factory import create_backend
from ._fake import FakeGitBackend
from ._format import (
    MODIFIED_GLYPH,
    UNTRACKED_GLYPH,
    format_git_status,
    format_indicators,
)
from ._models import (
    EMPTY_INDICATORS,
    AheadBehind,
    BranchListing,
    GitIndicators,
    GitInfo,
)
from ._parser import classify_line, is_conflict, parse_status
from ._service import GitStatusService
from ._stash import StashCounter, count_stash_entries

__all__ = [
    "BRANCH_ATTEMPTS",
    "BRANCH_CACHE_TTL_SECONDS",
    "EMPTY_INDICATORS",
    "GIT_ENV",
    "MODIFIED_GLYPH",
    "UNTRACKED_GLYPH",
    "AheadBehind",
    "BranchListing",
    "BranchResolver",
    "CliGitBackend",
    "DivergenceTracker",
    "DulwichGitBackend",
    "FakeGitBackend",
    "GitBackend",
    "GitIndicators",
    "GitInfo",
    "GitStatusService",
    "StashCounter",
    "branch_cache_key",
    "classify_line",
    "clean_branch_name",
    "count_stash_entries",
    "create_backend",
    "format_git_status",
    "format_indicators",
    "is_conflict",
    "parse_branch_listing",
    "parse_left_right",
    "parse_status",
]
