# ruff: noqa: TC003  # Path needed at runtime for method signatures
"""Current branch resolution with a short-lived cache."""

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from promptgit.git._backend import GitBackend
    from promptgit.utils import Cache

BRANCH_CACHE_TTL_SECONDS: Final = 60

type BranchAttempt = Callable[["GitBackend", Path], str | None]


def branch_cache_key(directory: Path) -> str:
    """Return the cache key holding the current branch of ``directory``."""
    return f"branch:{directory}:current"


def clean_branch_name(raw: str | None) -> str | None:
    """Trim a candidate branch name, returning None when nothing is left."""
    if raw is None:
        return None
    name = raw.strip()
    return name or None


def _show_current(backend: "GitBackend", directory: Path) -> str | None:
    return clean_branch_name(backend.show_current_branch(directory))


def _abbrev_ref(backend: "GitBackend", directory: Path) -> str | None:
    name = clean_branch_name(backend.abbrev_ref_head(directory))
    # Detached HEAD abbreviates to the literal "HEAD"
    if name == "HEAD":
        return None
    return name


def _branch_listing(backend: "GitBackend", directory: Path) -> str | None:
    return clean_branch_name(backend.list_branches(directory).current)


BRANCH_ATTEMPTS: Final[tuple[tuple[str, BranchAttempt], ...]] = (
    ("show_current", _show_current),
    ("abbrev_ref", _abbrev_ref),
    ("branch_listing", _branch_listing),
)


class BranchResolver:
    """Resolve the checked-out branch of a directory.

    Tries each strategy in ``BRANCH_ATTEMPTS`` in order; the first one that
    produces a non-empty name wins. A resolved name is cached for
    ``BRANCH_CACHE_TTL_SECONDS`` so repeated prompt renders skip git
    entirely.
    """

    _backend: "GitBackend"  # noqa: UP037
    _cache: "Cache | None"  # noqa: UP037
    _logger: "FilteringBoundLogger | None"  # noqa: UP037

    def __init__(
        self,
        backend: "GitBackend",  # noqa: UP037
        cache: "Cache | None" = None,  # noqa: UP037
        *,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the resolver.

        Args:
            backend: Backend used for git queries.
            cache: Cache for resolved names. None disables caching.
            logger: Optional logger for debug-level logging.
        """
        self._backend = backend
        self._cache = cache
        self._logger = logger

    def resolve(self, directory: Path) -> str | None:
        """Return the current branch name, or None if it cannot be determined.

        Args:
            directory: Directory inside the repository.

        Returns:
            The trimmed branch name, or None for a detached HEAD or when every
            strategy fails.
        """
        key = branch_cache_key(directory)
        cached = self._lookup(key)
        if cached is not None:
            return cached

        for name, attempt in BRANCH_ATTEMPTS:
            try:
                branch = attempt(self._backend, directory)
            except Exception as e:  # noqa: BLE001
                if self._logger:
                    self._logger.debug(
                        "branch_attempt_failed",
                        attempt=name,
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                continue
            if branch is not None:
                self._store(key, branch)
                return branch

        if self._logger:
            self._logger.debug("branch_unresolved", directory=str(directory))
        return None

    def _lookup(self, key: str) -> str | None:
        if self._cache is None:
            return None
        try:
            return clean_branch_name(self._cache.get(key, BRANCH_CACHE_TTL_SECONDS))
        except Exception as e:  # noqa: BLE001
            if self._logger:
                self._logger.debug("branch_cache_read_failed", key=key, error=str(e))
            return None

    def _store(self, key: str, branch: str) -> None:
        if self._cache is None:
            return
        try:
            stored = self._cache.set(key, branch)
        except Exception as e:  # noqa: BLE001
            stored = False
            if self._logger:
                self._logger.debug("branch_cache_write_failed", key=key, error=str(e))
        if not stored and self._logger:
            self._logger.debug("branch_cache_not_stored", key=key)
