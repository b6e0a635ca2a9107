# pyright: reportAny=false, reportExplicitAny=false
"""Turn pydantic validation errors into user-facing configuration issues.

Sections and keys promptgit does not model are ignored, so one config file
can be shared with other prompt tools.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from promptgit.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

# Constraint names in pydantic error context, with their wording
_CONSTRAINTS = (("gt", "greater than"), ("ge", "at least"))


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """One invalid configuration value.

    Attributes:
        key: Dotted key, e.g. ``git.backend``.
        message: Pydantic's description of the problem.
        expected: What a valid value looks like, when pydantic says.
        actual: The rejected value.
        source: Label of the source the value came from, if known.
    """

    key: str
    message: str
    expected: str | None
    actual: Any
    source: str | None = None


def _expected(error: "ErrorDetails") -> str | None:  # noqa: UP037
    ctx = error.get("ctx") or {}
    if "expected" in ctx:
        return str(ctx["expected"])
    for name, wording in _CONSTRAINTS:
        if name in ctx:
            return f"{wording} {ctx[name]}"
    return None


def issues_from_error(
    error: ValidationError, source: str | None = None
) -> list[ValidationIssue]:
    """Convert every error in ``error`` to a ValidationIssue."""
    return [
        ValidationIssue(
            key=".".join(str(part) for part in details["loc"]),
            message=details["msg"],
            expected=_expected(details),
            actual=details.get("input"),
            source=source,
        )
        for details in error.errors()
    ]


def validate_config(
    config: dict[str, Any], *, source: str | None = None
) -> list[ValidationIssue]:
    """Validate a raw configuration dict without building a Config.

    Args:
        config: Raw values; missing keys take their defaults.
        source: Label attached to every issue.

    Returns:
        The issues found, empty when the dict is valid.
    """
    # Deferred import to avoid circular dependency
    from promptgit.config._models import Config  # noqa: PLC0415

    try:
        _ = Config.model_validate(config)
    except ValidationError as e:
        return issues_from_error(e, source)
    return []


def raise_if_validation_errors(
    issues: list[ValidationIssue], source: str | None = None
) -> None:
    """Raise for the first issue, if there is one.

    Args:
        issues: Issues from validate_config or issues_from_error.
        source: Source label for the exception, overriding the issue's own.

    Raises:
        ConfigValidationError: If ``issues`` is not empty.
    """
    if not issues:
        return
    issue = issues[0]
    msg = f"Invalid configuration value for '{issue.key}'"
    raise ConfigValidationError(
        msg,
        key=issue.key,
        value=issue.actual,
        expected=issue.expected or issue.message,
        source=source or issue.source,
    )
