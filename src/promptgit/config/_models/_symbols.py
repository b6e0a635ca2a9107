"""Symbol and display configuration models.

Glyphs for the modified (``!``) and untracked (``?``) indicators are fixed
and live with the formatter, not here.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class SymbolConfig(BaseModel):
    """Display glyph for each configurable indicator kind.

    Defaults are the Nerd Font set.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    git: str = "\uf418"
    staged: str = "+"
    conflict: str = "×"
    stashed: str = "⚑"
    ahead: str = "⇡"
    behind: str = "⇣"
    diverged: str = "⇕"
    renamed: str = "»"
    deleted: str = "✘"


NERD_FONT_SYMBOLS = SymbolConfig()

ASCII_SYMBOLS = SymbolConfig(
    git="@",
    staged="+",
    conflict="C",
    stashed="$",
    ahead="A",
    behind="B",
    diverged="D",
    renamed=">",
    deleted="X",
)


class DisplayConfiguration(BaseModel):
    """Display section.

    Attributes:
        no_emoji: Force the ASCII symbol set.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    no_emoji: bool = False
