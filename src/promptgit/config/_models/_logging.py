"""Logging configuration model."""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class LogLevel(StrEnum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging section.

    Logs always go to a file; stdout belongs to the prompt.

    Attributes:
        level: Threshold. ``--verbose`` and PROMPTGIT_DEBUG force debug.
        format: One JSON object per line, or human-readable text.
        file: Log file. Empty selects the platform log directory.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""
