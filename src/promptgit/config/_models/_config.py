# pyright: reportExplicitAny=false, reportAny=false
"""The root configuration model.

Config is both the validation schema and the object commands read from.
It also keeps the raw merged dict, so keys it does not model survive
``to_dict`` and ``get``.
"""

from dataclasses import replace
from typing import TYPE_CHECKING, Any, ClassVar, Self

import tomli_w
from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from promptgit.config._defaults import DEFAULT_CONFIG
from promptgit.config._loader import deep_merge, parse_env_vars, read_toml_file
from promptgit.config._models._cache import CacheConfiguration
from promptgit.config._models._common import ConfigSource, ConfigSourceName
from promptgit.config._models._git import GitConfiguration
from promptgit.config._models._logging import LoggingConfig
from promptgit.config._models._symbols import (
    ASCII_SYMBOLS,
    DisplayConfiguration,
    SymbolConfig,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


class Config(BaseModel):
    """Validated promptgit configuration.

    Build instances with ``load``, ``from_file``, or ``from_dict``; each
    merges its input over the built-in defaults before validating.

    Example:
        >>> config = Config.from_dict({"git": {"backend": "dulwich"}})
        >>> config.git.backend
        <GitBackendName.DULWICH: 'dulwich'>
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    git: GitConfiguration = GitConfiguration()
    cache: CacheConfiguration = CacheConfiguration()
    display: DisplayConfiguration = DisplayConfiguration()
    symbols: SymbolConfig = SymbolConfig()
    ascii_symbols: SymbolConfig = ASCII_SYMBOLS
    logging: LoggingConfig = LoggingConfig()

    _raw: dict[str, Any] = PrivateAttr(default_factory=dict)
    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @classmethod
    def _build(
        cls,
        data: dict[str, Any],
        *,
        sources: tuple[ConfigSource, ...] = (),
        source_label: str | None = None,
    ) -> Self:
        # Deferred import to avoid circular dependency
        from promptgit.config._validation import (  # noqa: PLC0415
            issues_from_error,
            raise_if_validation_errors,
        )

        merged = deep_merge(DEFAULT_CONFIG, data)
        try:
            config = cls.model_validate(merged)
        except ValidationError as e:
            raise_if_validation_errors(issues_from_error(e), source=source_label)
            raise

        config._raw = merged
        config._sources = sources
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate ``data`` merged over the defaults.

        Raises:
            ConfigValidationError: If a value is invalid.
        """
        return cls._build(data)

    @classmethod
    def from_file(
        cls,
        path: "Path",  # noqa: UP037
        *,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load one TOML file merged over the defaults.

        No other file or environment variable is consulted; this backs
        ``--config``. ``cli_overrides`` still apply on top.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file is not valid TOML.
            ConfigValidationError: If a value is invalid.
        """
        data = read_toml_file(path)
        sources = [ConfigSource(ConfigSourceName.PROJECT, path, values=data)]
        if cli_overrides:
            sources.insert(0, ConfigSource(ConfigSourceName.CLI, values=cli_overrides))
            data = deep_merge(data, cli_overrides)
        return cls._build(data, sources=tuple(sources), source_label=str(path))

    @classmethod
    def load(
        cls,
        *,
        start: "Path | None" = None,  # noqa: UP037
        include_env: bool = True,
        include_cli: bool = False,
        cli_overrides: dict[str, Any] | None = None,
        environ: "Mapping[str, str] | None" = None,  # noqa: UP037
    ) -> Self:
        """Merge every discovered source, lowest precedence first.

        Args:
            start: Directory where project config discovery begins.
            include_env: Read ``PROMPTGIT_*`` and legacy variables.
            include_cli: Apply ``cli_overrides`` as the top layer.
            cli_overrides: Values from command-line options.
            environ: Environment mapping used instead of ``os.environ``.

        Raises:
            ConfigLoadError: If a config file is not valid TOML.
            ConfigValidationError: If the merged configuration is invalid.
        """
        # Deferred import to avoid circular dependency
        from promptgit.config._discovery import discover_sources  # noqa: PLC0415

        discovered = discover_sources(
            start,
            include_env=include_env,
            include_cli=include_cli,
            cli_overrides=cli_overrides,
        )

        merged: dict[str, Any] = {}
        loaded: list[ConfigSource] = []
        for source in reversed(discovered):
            match source.name:
                case ConfigSourceName.ENV:
                    values = parse_env_vars(environ)
                case ConfigSourceName.PROJECT | ConfigSourceName.USER:
                    path = source.path if source.exists else None
                    values = read_toml_file(path) if path is not None else {}
                case _:
                    values = source.values
            loaded.append(replace(source, values=values))
            merged = deep_merge(merged, values)

        return cls._build(merged, sources=tuple(reversed(loaded)))

    @property
    def sources(self) -> list[ConfigSource]:
        """Sources that built this configuration, highest precedence first."""
        return list(self._sources)

    def to_dict(self) -> dict[str, Any]:
        """Return the effective configuration as plain data.

        Unmodeled keys from the sources are included.
        """
        return deep_merge(self._raw, self.model_dump(mode="json"))

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as ``git.backend``.

        Returns:
            The value, or ``default`` when any part of the path is missing.
        """
        current: Any = self.to_dict()
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def to_toml(self) -> str:
        """Render the effective configuration as TOML."""
        return tomli_w.dumps(self.to_dict())
