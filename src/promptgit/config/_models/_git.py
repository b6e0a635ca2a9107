"""Git status configuration model."""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class GitBackendName(StrEnum):
    """Available git query backends."""

    CLI = "cli"
    DULWICH = "dulwich"


class GitConfiguration(BaseModel):
    """Git status section.

    Attributes:
        disabled: Skip git status entirely; get_git_info returns None.
        repo_check_timeout_ms: Timeout for the "is this a repository" check.
        query_timeout_ms: Default timeout for every other git query.
        backend: Which query backend to use.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    disabled: bool = False
    repo_check_timeout_ms: int = Field(default=5000, gt=0)
    query_timeout_ms: int = Field(default=5000, gt=0)
    backend: GitBackendName = GitBackendName.CLI
