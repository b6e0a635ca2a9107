"""Tests for promptgit.git._divergence module."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from promptgit.exceptions import GitQueryError
from promptgit.git import (
    AheadBehind,
    DivergenceTracker,
    FakeGitBackend,
    parse_left_right,
)

DIRECTORY = Path("/work/repo")


class TestParseLeftRight:
    def test_behind_then_ahead(self) -> None:
        assert parse_left_right("3\t5\n") == AheadBehind(ahead=5, behind=3)

    def test_zero_counts(self) -> None:
        assert parse_left_right("0\t0") == AheadBehind()

    @pytest.mark.parametrize("output", ["", "3", "1\t2\t3", "3 5"])
    def test_wrong_field_count(self, output: str) -> None:
        assert parse_left_right(output) == AheadBehind()

    def test_non_numeric_field_counts_zero(self) -> None:
        assert parse_left_right("x\t4") == AheadBehind(ahead=4, behind=0)


class TestDivergenceTracker:
    def test_counts_from_rev_list(self) -> None:
        backend = FakeGitBackend(
            responses={"upstream_ref": "origin/main\n", "rev_list_left_right": "3\t5\n"}
        )

        assert DivergenceTracker(backend).ahead_behind(DIRECTORY) == AheadBehind(
            ahead=5, behind=3
        )

    def test_no_upstream(self, mocker: MockerFixture) -> None:
        backend = FakeGitBackend(
            responses={"upstream_ref": GitQueryError("no upstream configured")}
        )
        logger = mocker.MagicMock()

        result = DivergenceTracker(backend, logger=logger).ahead_behind(DIRECTORY)

        assert result == AheadBehind()
        assert backend.called("rev_list_left_right") == 0
        assert logger.debug.call_args.args[0] == "no_upstream"

    def test_empty_upstream(self) -> None:
        backend = FakeGitBackend(responses={"upstream_ref": "\n"})

        assert DivergenceTracker(backend).ahead_behind(DIRECTORY) == AheadBehind()
        assert backend.called("rev_list_left_right") == 0

    def test_rev_list_failure(self) -> None:
        backend = FakeGitBackend(
            responses={
                "upstream_ref": "origin/main",
                "rev_list_left_right": GitQueryError("timed out", timed_out=True),
            }
        )

        assert DivergenceTracker(backend).ahead_behind(DIRECTORY) == AheadBehind()

    def test_unexpected_upstream_failure(self) -> None:
        backend = FakeGitBackend(responses={"upstream_ref": RuntimeError("bug")})

        assert DivergenceTracker(backend).ahead_behind(DIRECTORY) == AheadBehind()

    def test_unexpected_rev_list_failure(self) -> None:
        backend = FakeGitBackend(
            responses={
                "upstream_ref": "origin/main",
                "rev_list_left_right": UnicodeDecodeError(
                    "utf-8", b"\xff", 0, 1, "invalid start byte"
                ),
            }
        )

        assert DivergenceTracker(backend).ahead_behind(DIRECTORY) == AheadBehind()
