"""Tests for promptgit.cli helpers."""

from typing import cast

import orjson
import pytest
from cyclopts import App
from pytest_mock import MockerFixture

from promptgit.cli import CLIContext
from promptgit.cli._commands import (
    ExitCode,
    exit_with_error,
    exit_with_success,
    format_json,
    format_plain,
    format_table,
    format_toml,
    register_commands,
)
from promptgit.config import Config


class TestCommandRegistration:
    def test_register_commands_registers_subcommands(
        self, mocker: MockerFixture
    ) -> None:
        mock_app = mocker.MagicMock(spec=App)
        register_commands(mock_app)

        assert cast("int", mock_app.command.call_count) == 4  # pyright: ignore[reportAny]


class TestFormatters:
    def test_format_json(self) -> None:
        output = format_json({"branch": "main", "ahead": 1})

        assert orjson.loads(output) == {"branch": "main", "ahead": 1}
        assert "\n" in output

    def test_format_json_compact(self) -> None:
        assert format_json({"a": 1}, indent=False) == '{"a":1}'

    def test_format_toml(self) -> None:
        assert format_toml({"git": {"disabled": False}}) == "[git]\ndisabled = false\n"

    def test_format_table(self) -> None:
        output = format_table(["Field", "Value"], [["branch", "main"]])

        assert "Field" in output
        assert "main" in output
        assert output.count("|") >= 6

    def test_format_plain_nested(self) -> None:
        data = {"branch": "main", "indicators": {"staged": 1, "diverged": False}}

        assert format_plain(data) == (
            "branch=main\nindicators.staged=1\nindicators.diverged=false"
        )

    def test_format_plain_scalars(self) -> None:
        assert format_plain(None) == "null"
        assert format_plain(True) == "true"  # noqa: FBT003
        assert format_plain([1, "a"]) == "1\na"


class TestExitHelpers:
    def test_exit_with_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            exit_with_error("nothing here", ExitCode.NOT_FOUND)

        assert exc_info.value.code == ExitCode.NOT_FOUND
        assert "nothing here" in capsys.readouterr().err

    def test_exit_with_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            exit_with_success("done")

        assert exc_info.value.code == ExitCode.SUCCESS
        assert capsys.readouterr().out == "done\n"


class TestCLIContext:
    def test_default_context(self) -> None:
        CLIContext.reset()

        ctx = CLIContext.get_current()

        assert ctx.verbose is False
        assert ctx.logger is None
        assert ctx.config.git.disabled is False

    def test_set_and_reset(self) -> None:
        ctx = CLIContext(config=Config.from_dict({}), verbose=True)

        CLIContext.set_current(ctx)
        try:
            assert CLIContext.get_current() is ctx
        finally:
            CLIContext.reset()

        assert CLIContext.get_current() is not ctx
