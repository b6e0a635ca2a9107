# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Raw configuration sources: TOML files and environment variables.

Everything here works on plain nested dicts. Validation happens later,
when the merged dict is turned into pydantic models.
"""

import copy
import os
import tomllib
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

from promptgit.exceptions import ConfigLoadError

if TYPE_CHECKING:
    from pathlib import Path

type RawConfig = dict[str, Any]  # pyright: ignore[reportExplicitAny]

ENV_PREFIX: Final = "PROMPTGIT_"

# Statusline switches kept for existing shell setups. Flags are on only
# for the exact value "1".
LEGACY_ENV_FLAGS: Final[dict[str, str]] = {
    "CLAUDE_CODE_STATUSLINE_NO_GITSTATUS": "git.disabled",
    "CLAUDE_CODE_STATUSLINE_NO_EMOJI": "display.no_emoji",
}
LEGACY_ENV_VALUES: Final[dict[str, str]] = {
    "CLAUDE_CODE_STATUSLINE_CACHE_DIR": "cache.dir",
}

# Prefixed variables read directly by the logging and load layers
_RESERVED_ENV_KEYS: Final = frozenset({"DEBUG", "LOG_LEVEL", "STRICT_CONFIG"})


def read_toml_file(path: "Path") -> RawConfig:  # noqa: UP037
    """Parse the TOML file at ``path``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML. Line and column of the
            syntax error are attached.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise ConfigLoadError(msg, path=path, line=e.lineno, column=e.colno) from e


def deep_merge(base: RawConfig, override: RawConfig) -> RawConfig:
    """Return ``override`` layered over ``base`` as a new dict.

    Tables merge key by key. Any other value in ``override``, lists
    included, replaces the value in ``base``. Neither input is modified.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def parse_string_value(value: str) -> bool | int | str:
    """Infer the type of an environment variable value.

    ``true``/``false`` (any case) become booleans and integer literals become
    ints. Everything else stays a string; pydantic coerces from there.

    Examples:
        >>> parse_string_value("TRUE")
        True
        >>> parse_string_value("2500")
        2500
        >>> parse_string_value("~/.cache/prompt")
        '~/.cache/prompt'
    """
    lowered = value.strip().lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    try:
        return int(value)
    except ValueError:
        return value


def set_nested_key(d: RawConfig, key_path: str, value: object) -> None:
    """Assign ``value`` at dotted ``key_path``, creating tables on the way.

    A non-table value in the way is replaced by a table.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "git.disabled", True)
        >>> d
        {'git': {'disabled': True}}
    """
    *parents, leaf = key_path.split(".")
    table = d
    for part in parents:
        child = table.get(part)
        if not isinstance(child, dict):
            child = table[part] = {}
        table = child
    table[leaf] = value


def parse_env_vars(
    environ: Mapping[str, str] | None = None,
    prefix: str = ENV_PREFIX,
) -> RawConfig:
    """Collect configuration from environment variables.

    ``PROMPTGIT_GIT__QUERY_TIMEOUT_MS=2500`` sets ``git.query_timeout_ms``:
    the prefix is dropped, ``__`` separates tables, and names are lowercased.
    The legacy ``CLAUDE_CODE_STATUSLINE_*`` switches are applied first, so a
    prefixed variable for the same key wins.

    Args:
        environ: Environment mapping. Defaults to ``os.environ``.
        prefix: Variable prefix.

    Returns:
        Nested configuration values.
    """
    env = os.environ if environ is None else environ
    result: RawConfig = {}

    for name, key_path in LEGACY_ENV_FLAGS.items():
        if env.get(name) == "1":
            set_nested_key(result, key_path, True)  # noqa: FBT003
    for name, key_path in LEGACY_ENV_VALUES.items():
        if env.get(name):
            set_nested_key(result, key_path, env[name])

    for name, value in env.items():
        key = name.removeprefix(prefix)
        if key == name or not key or key in _RESERVED_ENV_KEYS:
            continue
        key_path = key.replace("__", ".").lower()
        set_nested_key(result, key_path, parse_string_value(value))

    return result
