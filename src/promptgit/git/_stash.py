# ruff: noqa: TC003  # Path needed at runtime for method signatures
"""Stash entry counting."""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from promptgit.git._backend import GitBackend


def count_stash_entries(output: str) -> int:
    """Count non-blank lines of ``git stash list`` output."""
    return sum(1 for line in output.splitlines() if line.strip())


class StashCounter:
    """Count stash entries. Any failure counts as zero."""

    def __init__(
        self,
        backend: "GitBackend",  # noqa: UP037
        *,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        self._backend = backend
        self._logger = logger

    def count(self, directory: Path) -> int:
        try:
            output = self._backend.stash_list(directory)
        except Exception as e:  # noqa: BLE001
            if self._logger:
                self._logger.debug(
                    "stash_list_failed", error=str(e), error_type=type(e).__name__
                )
            return 0
        return count_stash_entries(output)
