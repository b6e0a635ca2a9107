"""Glyph set selection for the current terminal.

Nerd Font detection looks only at environment variables; probing installed
fonts would cost a process spawn on every prompt render.
"""

import os
from collections.abc import Mapping
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from promptgit.config import Config, SymbolConfig

NERD_FONT_TERM_PROGRAMS: Final = frozenset(
    {"vscode", "ghostty", "wezterm", "iterm.app", "iterm"}
)

NERD_FONT_TERMS: Final = frozenset(
    {
        "alacritty",
        "xterm-kitty",
        "kitty",
        "wezterm",
        "xterm-ghostty",
        "ghostty",
        "xterm-256color",
    }
)

_FONT_HINT_VARS: Final = ("POWERLINE_COMMAND", "NERDFONTS", "FONT_FAMILY")


def detect_nerd_font(environ: Mapping[str, str] | None = None) -> bool:
    """Guess whether the terminal renders Nerd Font glyphs.

    Args:
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        True if any known hint is present.
    """
    env = os.environ if environ is None else environ

    if env.get("NERD_FONT") == "1":
        return True
    if env.get("TERM_PROGRAM", "").lower() in NERD_FONT_TERM_PROGRAMS:
        return True
    if env.get("TERM", "").lower() in NERD_FONT_TERMS:
        return True
    if any("nerd" in env.get(name, "").lower() for name in _FONT_HINT_VARS):
        return True
    return bool(env.get("VSCODE_PID"))


def resolve_symbols(
    config: "Config",  # noqa: UP037
    environ: Mapping[str, str] | None = None,
) -> "SymbolConfig":  # noqa: UP037
    """Pick the configured Nerd Font set or the ASCII fallback.

    ``display.no_emoji`` always selects ASCII.

    Args:
        config: Loaded configuration.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        The symbol set to render with.
    """
    if config.display.no_emoji or not detect_nerd_font(environ):
        return config.ascii_symbols
    return config.symbols
