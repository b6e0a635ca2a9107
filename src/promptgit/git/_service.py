"""Git status service: one call per prompt render."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING

from promptgit.config import GitConfiguration
from promptgit.exceptions import GitQueryError
from promptgit.git._branch import BranchResolver
from promptgit.git._divergence import DivergenceTracker
from promptgit.git._models import EMPTY_INDICATORS, GitIndicators, GitInfo
from promptgit.git._parser import parse_status
from promptgit.git._stash import StashCounter

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from promptgit.git._backend import GitBackend
    from promptgit.utils import Cache

_MAX_WORKERS = 3


class GitStatusService:
    """Collect the branch and indicators of a directory.

    ``get_git_info`` never raises. Each indicator query fails on its own:
    a failed status, stash, or upstream query leaves only its own fields at
    zero. A clean tree and a failed status query therefore look the same.

    Example:
        >>> service = GitStatusService(CliGitBackend(), MemoryCache())
        >>> info = service.get_git_info(Path.cwd())
        >>> if info is not None:
        ...     print(format_git_status(info, symbols))
    """

    _backend: "GitBackend"  # noqa: UP037
    _config: GitConfiguration
    _logger: "FilteringBoundLogger | None"  # noqa: UP037

    def __init__(
        self,
        backend: "GitBackend",  # noqa: UP037
        cache: "Cache | None" = None,  # noqa: UP037
        *,
        config: GitConfiguration | None = None,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the service.

        Args:
            backend: Backend used for every git query.
            cache: Cache for the resolved branch name. None disables caching.
            config: Default git configuration, used when a call passes none.
            logger: Optional logger for debug-level logging.
        """
        self._backend = backend
        self._config = config if config is not None else GitConfiguration()
        self._logger = logger
        self._branches = BranchResolver(backend, cache, logger=logger)
        self._stashes = StashCounter(backend, logger=logger)
        self._divergence = DivergenceTracker(backend, logger=logger)

    def get_git_info(
        self,
        directory: Path | str,
        config: GitConfiguration | None = None,
    ) -> GitInfo | None:
        """Return the branch and indicators of ``directory``.

        Args:
            directory: Directory to inspect.
            config: Git configuration for this call. None uses the service
                default.

        Returns:
            GitInfo, or None when git status is disabled, the directory is not
            in a repository, the branch cannot be resolved, or anything fails
            unexpectedly.
        """
        effective = config if config is not None else self._config

        try:
            # Cache keys embed the path, so "." must not collide across repos
            return self._collect(Path(directory).resolve(), effective)
        except Exception as e:  # noqa: BLE001
            if self._logger:
                self._logger.debug(
                    "git_info_failed",
                    directory=str(directory),
                    error=str(e),
                    error_type=type(e).__name__,
                )
            return None

    def _collect(self, directory: Path, config: GitConfiguration) -> GitInfo | None:
        if config.disabled:
            if self._logger:
                self._logger.debug("git_status_disabled")
            return None

        try:
            in_repo = self._backend.is_repository(
                directory, timeout_ms=config.repo_check_timeout_ms
            )
        except GitQueryError as e:
            if self._logger:
                self._logger.debug("repo_check_failed", error=str(e))
            return None
        if not in_repo:
            if self._logger:
                self._logger.debug("not_a_repository", directory=str(directory))
            return None

        branch = self._branches.resolve(directory)
        if branch is None:
            return None

        return GitInfo(branch=branch, indicators=self._indicators(directory))

    def _file_indicators(self, directory: Path) -> GitIndicators:
        try:
            output = self._backend.status_porcelain(directory)
        except Exception as e:  # noqa: BLE001
            if self._logger:
                self._logger.debug(
                    "status_failed", error=str(e), error_type=type(e).__name__
                )
            return EMPTY_INDICATORS
        return parse_status(output)

    def _indicators(self, directory: Path) -> GitIndicators:
        with ThreadPoolExecutor(
            max_workers=_MAX_WORKERS, thread_name_prefix="promptgit"
        ) as executor:
            files = executor.submit(self._file_indicators, directory)
            stashed = executor.submit(self._stashes.count, directory)
            counts = executor.submit(self._divergence.ahead_behind, directory)

            indicators = files.result().with_stashed(stashed.result())
            ahead, behind = counts.result()

        return indicators.with_ahead_behind(ahead, behind)
