"""Git status indicators for shell prompts."""

from promptgit.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    GitQueryError,
    PromptGitError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "GitQueryError",
    "PromptGitError",
    "__version__",
]
