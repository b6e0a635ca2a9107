"""Where configuration values come from."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class ConfigSourceName(StrEnum):
    """Source kinds, listed from highest to lowest precedence."""

    CLI = "cli"
    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """One layer of configuration.

    Attributes:
        name: Kind of source.
        path: File backing the source. None for cli, env, and default.
        exists: Whether the file exists. Non-file sources always exist,
            except cli when no override was given.
        values: Raw values read from the source. Empty until loading.
    """

    name: ConfigSourceName
    path: "Path | None" = None  # noqa: UP037
    exists: bool = True
    values: dict[str, Any] = field(default_factory=dict)  # pyright: ignore[reportExplicitAny]
