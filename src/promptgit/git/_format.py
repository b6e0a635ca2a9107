"""Render git info as a prompt fragment."""

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from promptgit.config import SymbolConfig
    from promptgit.git._models import GitIndicators, GitInfo

MODIFIED_GLYPH: Final = "!"
UNTRACKED_GLYPH: Final = "?"


def format_indicators(indicators: "GitIndicators", symbols: "SymbolConfig") -> str:  # noqa: UP037
    """Render indicators as a compact glyph string.

    One glyph per nonzero count, in the order stashed, deleted, modified,
    staged, untracked, renamed, conflicts. The diverged glyph follows when
    diverged; otherwise the ahead and behind glyphs follow as applicable.
    Counts are not shown, only presence.

    Args:
        indicators: Indicators to render.
        symbols: Glyph set to render with.

    Returns:
        The glyph string, empty for a clean tree in sync with its upstream.
    """
    glyphs = [
        glyph
        for count, glyph in (
            (indicators.stashed, symbols.stashed),
            (indicators.deleted, symbols.deleted),
            (indicators.modified, MODIFIED_GLYPH),
            (indicators.staged, symbols.staged),
            (indicators.untracked, UNTRACKED_GLYPH),
            (indicators.renamed, symbols.renamed),
            (indicators.conflicts, symbols.conflict),
        )
        if count > 0
    ]

    if indicators.diverged:
        glyphs.append(symbols.diverged)
    else:
        if indicators.ahead > 0:
            glyphs.append(symbols.ahead)
        if indicators.behind > 0:
            glyphs.append(symbols.behind)

    return "".join(glyphs)


def format_git_status(git_info: "GitInfo", symbols: "SymbolConfig") -> str:  # noqa: UP037
    """Render the git fragment of a prompt.

    Returns ``" <git> <branch> [<indicators>]"``, or ``" <git> <branch>"``
    when there is nothing to indicate.
    """
    rendered = format_indicators(git_info.indicators, symbols)
    fragment = f" {symbols.git} {git_info.branch}"
    if rendered:
        return f"{fragment} [{rendered}]"
    return fragment
