"""Parser for ``git status --porcelain`` output.

Each line starts with two status characters, X (index/staged) and Y
(working tree/unstaged), followed by a space and the path. Classification
is per line with no cross-line state:

1. Conflict: X or Y is ``U``, or XY is ``AA`` or ``DD``.
2. Untracked: XY is ``??``.
3. Otherwise X and Y each contribute independently.
"""

from collections import Counter
from typing import Final

from promptgit.git._models import EMPTY_INDICATORS, GitIndicators

_STAGED_CODES: Final[dict[str, str]] = {
    "M": "staged",
    "A": "staged",
    "C": "staged",
    "D": "deleted",
    "R": "renamed",
}

_UNSTAGED_CODES: Final[dict[str, str]] = {
    "M": "modified",
    "D": "deleted",
    "R": "renamed",
}

_CONFLICT_PAIRS: Final = frozenset({"AA", "DD"})


def is_conflict(staged: str, unstaged: str) -> bool:
    """Return whether a status code pair denotes an unmerged path."""
    return staged == "U" or unstaged == "U" or staged + unstaged in _CONFLICT_PAIRS


def classify_line(line: str) -> tuple[str, ...]:
    """Return the indicator fields a single status line increments.

    Lines shorter than two characters and blank lines increment nothing.
    Leading whitespace is significant: it is the staged column.

    Args:
        line: One line of porcelain status output.

    Returns:
        Field names of GitIndicators, one entry per increment.
    """
    if len(line) < 2 or not line.strip():
        return ()

    staged, unstaged = line[0], line[1]

    if is_conflict(staged, unstaged):
        return ("conflicts",)
    if staged == "?" and unstaged == "?":
        return ("untracked",)

    return tuple(
        field
        for field in (_STAGED_CODES.get(staged), _UNSTAGED_CODES.get(unstaged))
        if field is not None
    )


def parse_status(text: str) -> GitIndicators:
    """Count porcelain status lines into indicators.

    Stash, ahead, behind, and diverged are left at their baseline; they come
    from other queries.

    Args:
        text: Raw ``git status --porcelain`` output.

    Returns:
        Indicators with file counts filled in.
    """
    counts: Counter[str] = Counter()
    for line in text.splitlines():
        counts.update(classify_line(line))

    if not counts:
        return EMPTY_INDICATORS
    return GitIndicators(**counts)
