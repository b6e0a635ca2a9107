"""Built-in configuration values.

Every source is merged over DEFAULT_CONFIG, so a key missing everywhere else
still has a value. The dict is never mutated; merges copy it.
"""

from typing import Any

import tomli_w

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "git": {
        "disabled": False,
        "repo_check_timeout_ms": 5000,
        "query_timeout_ms": 5000,
        "backend": "cli",
    },
    "cache": {
        "dir": "",
        "ttl_seconds": 300,
    },
    "display": {
        "no_emoji": False,
    },
    "symbols": {
        "git": "\uf418",
        "staged": "+",
        "conflict": "×",
        "stashed": "⚑",
        "ahead": "⇡",
        "behind": "⇣",
        "diverged": "⇕",
        "renamed": "»",
        "deleted": "✘",
    },
    "ascii_symbols": {
        "git": "@",
        "staged": "+",
        "conflict": "C",
        "stashed": "$",
        "ahead": "A",
        "behind": "B",
        "diverged": "D",
        "renamed": ">",
        "deleted": "X",
    },
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
}

_SAMPLE_HEADER = """\
# promptgit configuration
#
# Save as promptgit.toml in a project directory (or its parent), or at the
# user config path listed by `promptgit config sources`.
# Every key is optional; omitted keys keep their defaults.

"""


def generate_sample_config() -> str:
    """Generate a sample configuration file containing every default.

    Returns:
        TOML document with a short explanatory header.
    """
    return _SAMPLE_HEADER + tomli_w.dumps(DEFAULT_CONFIG)
