"""File-backed structlog loggers.

The prompt owns stdout, so promptgit only ever logs to a file. Loggers are
built with ``structlog.wrap_logger`` and leave the global structlog
configuration alone.
"""

import logging
from logging.handlers import RotatingFileHandler
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Final, Literal, cast

import structlog

from ._paths import get_cli_log_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]

DEBUG_ENV_VAR: Final = "PROMPTGIT_DEBUG"

# The CLI logs once per prompt render
CLI_LOG_MAX_BYTES: Final = 1_048_576
CLI_LOG_BACKUP_COUNT: Final = 3


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name to a ``logging`` level.

    PROMPTGIT_DEBUG, when set to any non-empty value, forces DEBUG. Without
    ``level`` the PROMPTGIT_LOG_LEVEL variable is consulted. Unknown names
    map to INFO.
    """
    if getenv(DEBUG_ENV_VAR):
        return logging.DEBUG
    name = level if level is not None else getenv("PROMPTGIT_LOG_LEVEL", "info")
    return logging.getLevelNamesMapping().get(name.upper(), logging.INFO)


def _rotating_logger(
    path: Path, level: int, max_bytes: int, backups: int
) -> logging.Logger:
    stdlib_logger = logging.getLogger(f"promptgit.file.{path}")
    for old in stdlib_logger.handlers:
        old.close()
    stdlib_logger.handlers.clear()
    stdlib_logger.propagate = False
    stdlib_logger.setLevel(level)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups)
    handler.setFormatter(logging.Formatter("%(message)s"))
    stdlib_logger.addHandler(handler)
    return stdlib_logger


def create_logger(
    log_file_path: str | Path,
    *,
    log_level: int | None = None,
    log_format: LogFormatType = "json",
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger that appends to ``log_file_path``.

    Args:
        log_file_path: Log file; parent directories are created.
        log_level: Threshold. None resolves it from the environment.
        log_format: ``json`` for one object per line, ``text`` for
            ``timestamp [level] event key=value`` lines.
        max_bytes: Rotate once the file reaches this size. Rotation is on
            only when ``backup_count`` is also given.
        backup_count: Number of rotated files to keep.

    Returns:
        A filtering bound logger.
    """
    path = Path(log_file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    level = log_level if log_level is not None else resolve_log_level()

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    if max_bytes is not None and backup_count is not None:
        raw_logger: object = _rotating_logger(path, level, max_bytes, backup_count)
    else:
        raw_logger = structlog.WriteLogger(path.open("a", encoding="utf-8"))

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            raw_logger,
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
    log_file: str = "",
    command: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create the rotating logger used by CLI commands.

    Args:
        level: Level name from configuration.
        log_format: ``json`` or ``text``.
        log_file: Log file path. Empty selects the platform log directory.
        command: Command name bound to every entry, if given.
    """
    logger = create_logger(
        log_file or get_cli_log_file(),
        log_level=resolve_log_level(level),
        log_format=log_format,
        max_bytes=CLI_LOG_MAX_BYTES,
        backup_count=CLI_LOG_BACKUP_COUNT,
    )
    return logger.bind(command=command) if command else logger
