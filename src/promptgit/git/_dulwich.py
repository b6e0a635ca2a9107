# ruff: noqa: TC002, TC003  # Path and Repo needed at runtime
"""Git query backend implemented with dulwich.

Answers the same queries as the git binary without spawning processes, for
hosts where git is not installed. Output is shaped like the corresponding
git command so the same parsers apply. Paths in status output are
repository-relative.
"""

import concurrent.futures
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from dulwich import porcelain
from dulwich.errors import NotGitRepository
from dulwich.repo import Repo
from dulwich.stash import Stash

from promptgit.exceptions import GitQueryError
from promptgit.git._models import BranchListing
from promptgit.utils import DEFAULT_TIMEOUT_MS

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_HEADS_PREFIX = "refs/heads/"


def decode_bytes(value: bytes | str) -> str:
    """Decode bytes to str if needed."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def discover_repo(directory: Path | str) -> Repo | None:
    """Discover the repository containing ``directory``.

    Returns:
        Repo instance if found, None otherwise.
    """
    try:
        return Repo.discover(str(directory))
    except NotGitRepository:
        return None


def get_worktree_dir(repo: Repo) -> Path:
    """Get the working tree directory for a repository."""
    path = Path(decode_bytes(repo.path))
    if path.name == ".git":
        return path.parent
    return path


def _symbolic_head(repo: Repo) -> str | None:
    head_ref = repo.refs.get_symrefs().get(b"HEAD")
    if head_ref is None:
        return None
    head_ref_str = decode_bytes(head_ref)
    if head_ref_str.startswith(_HEADS_PREFIX):
        return head_ref_str[len(_HEADS_PREFIX) :]
    return None


def _require_branch(repo: Repo) -> str:
    branch = _symbolic_head(repo)
    if branch is None:
        msg = "HEAD is detached"
        raise GitQueryError(msg)
    return branch


def _upstream(repo: Repo) -> tuple[str, bytes]:
    """Return the upstream display name and ref for the current branch.

    Raises:
        GitQueryError: If HEAD is detached or no upstream is configured.
    """
    branch = _require_branch(repo)
    config = repo.get_config()
    section = (b"branch", branch.encode("utf-8"))
    try:
        remote = config.get(section, b"remote")
        merge = config.get(section, b"merge")
    except KeyError as e:
        msg = f"no upstream configured for branch '{branch}'"
        raise GitQueryError(msg) from e

    merge_str = decode_bytes(merge)
    short = merge_str.removeprefix(_HEADS_PREFIX)
    if remote == b".":
        return short, merge
    remote_str = decode_bytes(remote)
    return f"{remote_str}/{short}", f"refs/remotes/{remote_str}/{short}".encode()


def _porcelain_lines(repo: Repo) -> list[str]:
    status = porcelain.status(repo)
    worktree = get_worktree_dir(repo)

    # Path -> [X, Y]; dulwich reports staged and unstaged changes separately
    codes: dict[str, list[str]] = {}

    staged_codes = {"add": "A", "delete": "D", "modify": "M"}
    for change_type, code in staged_codes.items():
        for path in status.staged.get(change_type, []):
            codes.setdefault(decode_bytes(path), [" ", " "])[0] = code

    for path in status.unstaged:
        path_str = decode_bytes(path)
        code = "M" if (worktree / path_str).exists() else "D"
        codes.setdefault(path_str, [" ", " "])[1] = code

    lines = [f"{x}{y} {path}" for path, (x, y) in sorted(codes.items())]
    lines.extend(f"?? {decode_bytes(path)}" for path in status.untracked)
    return lines


def _count_commits(repo: Repo, include: bytes, exclude: bytes) -> int:
    return sum(1 for _ in repo.get_walker(include=[include], exclude=[exclude]))


class DulwichGitBackend:
    """Answer git queries in-process with dulwich.

    Each query opens the repository, runs on a worker thread bounded by the
    timeout, and closes the repository again.
    """

    _timeout_ms: int
    _logger: "FilteringBoundLogger | None"  # noqa: UP037

    def __init__(
        self,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the backend.

        Args:
            timeout_ms: Default timeout for every query.
            logger: Optional logger for debug-level query logging.
        """
        self._timeout_ms = timeout_ms
        self._logger = logger

    def _query[T](
        self,
        name: str,
        directory: Path,
        func: Callable[[Repo], T],
        *,
        timeout_ms: int | None = None,
    ) -> T:
        def _with_repo() -> T:
            repo = discover_repo(directory)
            if repo is None:
                msg = f"not a git repository: {directory}"
                raise GitQueryError(msg)
            try:
                return func(repo)
            finally:
                repo.close()

        timeout_seconds = (
            timeout_ms if timeout_ms is not None else self._timeout_ms
        ) / 1000.0

        executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(_with_repo)
            result = future.result(timeout=timeout_seconds)
        except concurrent.futures.TimeoutError as e:
            msg = f"{name} timed out after {timeout_seconds}s"
            raise GitQueryError(msg, timed_out=True) from e
        except GitQueryError:
            raise
        except (OSError, KeyError, ValueError) as e:
            msg = f"{name} failed: {e}"
            raise GitQueryError(msg) from e
        finally:
            # Do not wait for a timed-out worker
            executor.shutdown(wait=False, cancel_futures=True)

        if self._logger:
            self._logger.debug("dulwich_query", query=name, directory=str(directory))
        return result

    def is_repository(self, directory: Path, *, timeout_ms: int | None = None) -> bool:
        try:
            return self._query(
                "is_repository", directory, lambda _repo: True, timeout_ms=timeout_ms
            )
        except GitQueryError as e:
            if e.timed_out:
                raise
            return False

    def show_current_branch(self, directory: Path) -> str:
        # git prints an empty line for a detached HEAD
        return self._query(
            "show_current_branch",
            directory,
            lambda repo: (_symbolic_head(repo) or "") + "\n",
        )

    def abbrev_ref_head(self, directory: Path) -> str:
        return self._query(
            "abbrev_ref_head",
            directory,
            lambda repo: (_symbolic_head(repo) or "HEAD") + "\n",
        )

    def list_branches(self, directory: Path) -> BranchListing:
        def _list(repo: Repo) -> BranchListing:
            names = sorted(
                decode_bytes(name)
                for name in repo.refs.keys(base=_HEADS_PREFIX.encode())
            )
            return BranchListing(current=_symbolic_head(repo), branches=tuple(names))

        return self._query("list_branches", directory, _list)

    def status_porcelain(self, directory: Path) -> str:
        return self._query(
            "status_porcelain",
            directory,
            lambda repo: "".join(f"{line}\n" for line in _porcelain_lines(repo)),
        )

    def stash_list(self, directory: Path) -> str:
        def _stashes(repo: Repo) -> str:
            entries = Stash.from_repo(repo).stashes()
            return "".join(
                f"stash@{{{index}}}: {decode_bytes(entry.message)}\n"
                for index, entry in enumerate(entries)
            )

        return self._query("stash_list", directory, _stashes)

    def upstream_ref(self, directory: Path) -> str:
        return self._query(
            "upstream_ref", directory, lambda repo: _upstream(repo)[0] + "\n"
        )

    def rev_list_left_right(self, directory: Path) -> str:
        def _counts(repo: Repo) -> str:
            _, upstream_ref = _upstream(repo)
            try:
                head = repo.head()
                upstream = repo.refs[upstream_ref]
            except KeyError as e:
                msg = f"cannot resolve {decode_bytes(upstream_ref)}"
                raise GitQueryError(msg) from e
            behind = _count_commits(repo, upstream, head)
            ahead = _count_commits(repo, head, upstream)
            return f"{behind}\t{ahead}\n"

        return self._query("rev_list_left_right", directory, _counts)
