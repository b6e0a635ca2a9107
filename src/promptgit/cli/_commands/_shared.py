# pyright: reportExplicitAny=false
"""Exit codes, output formatters, and exit helpers shared by commands.

Formatter libraries are imported on first use; ``promptgit status`` runs on
every prompt render and needs none of them.
"""

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Never

if TYPE_CHECKING:
    from rich.console import Console

type FormattableData = dict[str, Any]

type PlainValue = (
    None | bool | int | float | str | list[PlainValue] | dict[str, PlainValue]
)


class ExitCode(IntEnum):
    """Process exit codes. ``status`` always exits SUCCESS."""

    SUCCESS = 0
    LOAD_ERROR = 1
    NOT_FOUND = 3
    INTERNAL_ERROR = 5


def format_json(data: FormattableData, *, indent: bool = True) -> str:
    """Serialize ``data`` with orjson, two-space indented unless disabled."""
    import orjson  # noqa: PLC0415

    return orjson.dumps(data, option=orjson.OPT_INDENT_2 if indent else 0).decode()


def format_toml(data: FormattableData) -> str:
    import tomli_w  # noqa: PLC0415

    return tomli_w.dumps(data)


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Render rows as a Markdown table."""
    from pytablewriter import MarkdownTableWriter  # noqa: PLC0415

    return MarkdownTableWriter(headers=headers, value_matrix=rows, margin=1).dumps()


def format_plain(value: PlainValue, prefix: str = "") -> str:
    """Render ``value`` for line-oriented shell consumption.

    Tables become ``dotted.key=value`` lines and lists one line per item.
    Scalars use TOML spelling: ``true``, ``false``, and ``null`` for None.

    Args:
        value: Value to render.
        prefix: Dotted key of ``value`` inside an enclosing table.
    """
    match value:
        case None:
            return "null"
        case bool():
            return str(value).lower()
        case list():
            return "\n".join(format_plain(item) for item in value)
        case dict():
            lines: list[str] = []
            for key, item in value.items():
                path = f"{prefix}.{key}" if prefix else key
                if isinstance(item, dict):
                    lines.append(format_plain(item, path))
                else:
                    lines.append(f"{path}={format_plain(item)}")
            return "\n".join(lines)
        case _:
            return str(value)


def get_error_console() -> "Console":  # noqa: UP037
    from rich.console import Console  # noqa: PLC0415

    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: "Console | None" = None,  # noqa: UP037
) -> Never:
    """Print ``Error: message`` to stderr and exit with ``code``.

    Raises:
        SystemExit: Always.
    """
    error_console = console if console is not None else get_error_console()
    error_console.print(f"[red]Error:[/red] {message}", highlight=False)
    raise SystemExit(code)


def exit_with_success(message: str | None = None) -> Never:
    """Print ``message`` to stdout, if given, and exit with SUCCESS.

    Raises:
        SystemExit: Always.
    """
    if message is not None:
        print(message)  # noqa: T201
    raise SystemExit(ExitCode.SUCCESS)
