# ruff: noqa: TC003  # Path needed at runtime for method signatures
"""Ahead/behind tracking against the upstream branch."""

from pathlib import Path
from typing import TYPE_CHECKING

from promptgit.git._models import AheadBehind

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from promptgit.git._backend import GitBackend


def _parse_count(field: str) -> int:
    try:
        return max(int(field.strip()), 0)
    except ValueError:
        return 0


def parse_left_right(output: str) -> AheadBehind:
    """Parse ``git rev-list --count --left-right @{u}...HEAD`` output.

    The output is ``<behind>\\t<ahead>``. A field that is not a number counts
    as zero; output without exactly two fields yields ``(0, 0)``.

    Args:
        output: Raw command output.

    Returns:
        Ahead and behind counts.
    """
    fields = output.strip().split("\t")
    if len(fields) != 2:  # noqa: PLR2004
        return AheadBehind()
    behind, ahead = fields
    return AheadBehind(ahead=_parse_count(ahead), behind=_parse_count(behind))


class DivergenceTracker:
    """Measure how far HEAD is ahead of and behind its upstream.

    Branches without an upstream, and any failed query, report ``(0, 0)``.
    The caller derives the diverged flag.
    """

    def __init__(
        self,
        backend: "GitBackend",  # noqa: UP037
        *,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        self._backend = backend
        self._logger = logger

    def ahead_behind(self, directory: Path) -> AheadBehind:
        """Return ahead/behind counts for the current branch of ``directory``."""
        try:
            upstream = self._backend.upstream_ref(directory).strip()
        except Exception as e:  # noqa: BLE001
            if self._logger:
                self._logger.debug("no_upstream", error=str(e))
            return AheadBehind()
        if not upstream:
            if self._logger:
                self._logger.debug("no_upstream")
            return AheadBehind()

        try:
            output = self._backend.rev_list_left_right(directory)
        except Exception as e:  # noqa: BLE001
            if self._logger:
                self._logger.debug("rev_list_failed", upstream=upstream, error=str(e))
            return AheadBehind()
        return parse_left_right(output)
