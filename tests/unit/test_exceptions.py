"""Tests for promptgit.exceptions module."""

from pathlib import Path

from promptgit import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    GitQueryError,
    PromptGitError,
)


class TestHierarchy:
    def test_all_derive_from_base(self) -> None:
        for exc_type in (
            ConfigError,
            ConfigLoadError,
            ConfigValidationError,
            GitQueryError,
        ):
            assert issubclass(exc_type, PromptGitError)

    def test_config_errors(self) -> None:
        assert issubclass(ConfigLoadError, ConfigError)
        assert issubclass(ConfigValidationError, ConfigError)


class TestGitQueryError:
    def test_defaults(self) -> None:
        error = GitQueryError("failed")

        assert str(error) == "failed"
        assert error.git_args == ()
        assert error.exit_code is None
        assert error.stderr == ""
        assert error.timed_out is False

    def test_context(self) -> None:
        error = GitQueryError(
            "git status exited with code 128",
            args=("status", "--porcelain"),
            exit_code=128,
            stderr="fatal: not a git repository",
        )

        assert error.git_args == ("status", "--porcelain")
        assert error.exit_code == 128


class TestConfigErrors:
    def test_load_error_location(self) -> None:
        error = ConfigLoadError("bad toml", path=Path("x.toml"), line=3, column=7)

        assert (error.path, error.line, error.column) == (Path("x.toml"), 3, 7)

    def test_validation_error_context(self) -> None:
        error = ConfigValidationError(
            "invalid", key="git.backend", value="svn", expected="cli or dulwich"
        )

        assert error.key == "git.backend"
        assert error.value == "svn"
        assert error.source is None

    def test_load_error_location_omits_unknown_parts(self) -> None:
        assert ConfigLoadError("x", path=Path("a.toml"), line=2).location == "a.toml:2"
        assert ConfigLoadError("x").location == ""
