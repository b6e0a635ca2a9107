"""Backend selection from configuration."""

from typing import TYPE_CHECKING

from promptgit.config import GitBackendName, GitConfiguration
from promptgit.git._cli import CliGitBackend
from promptgit.git._dulwich import DulwichGitBackend

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from promptgit.git._backend import GitBackend


def create_backend(
    config: GitConfiguration | None = None,
    *,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> "GitBackend":  # noqa: UP037
    """Create the git backend named by ``config.backend``.

    Args:
        config: Git configuration. None uses the defaults.
        logger: Optional logger passed to the backend.

    Returns:
        A backend whose default timeout is ``config.query_timeout_ms``.
    """
    effective = config if config is not None else GitConfiguration()
    if effective.backend == GitBackendName.DULWICH:
        return DulwichGitBackend(timeout_ms=effective.query_timeout_ms, logger=logger)
    return CliGitBackend(timeout_ms=effective.query_timeout_ms, logger=logger)
