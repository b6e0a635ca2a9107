"""Tests for promptgit.git._fake module."""

from pathlib import Path

import pytest

from promptgit.exceptions import GitQueryError
from promptgit.git import BranchListing, FakeGitBackend, GitBackend

DIRECTORY = Path("/work/repo")


class TestFakeGitBackend:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(FakeGitBackend(), GitBackend)

    def test_returns_scripted_response(self) -> None:
        backend = FakeGitBackend(responses={"stash_list": "stash@{0}: WIP\n"})

        assert backend.stash_list(DIRECTORY) == "stash@{0}: WIP\n"

    def test_raises_scripted_exception(self) -> None:
        backend = FakeGitBackend(responses={"upstream_ref": GitQueryError("none")})

        with pytest.raises(GitQueryError, match="none"):
            _ = backend.upstream_ref(DIRECTORY)

    def test_missing_response_raises_query_error(self) -> None:
        with pytest.raises(GitQueryError) as exc_info:
            _ = FakeGitBackend().status_porcelain(DIRECTORY)

        assert exc_info.value.exit_code == 128

    def test_missing_repository_response_is_query_error(self) -> None:
        with pytest.raises(GitQueryError):
            _ = FakeGitBackend().is_repository(DIRECTORY)

    def test_wrong_response_type(self) -> None:
        backend = FakeGitBackend(responses={"list_branches": "main"})

        with pytest.raises(TypeError):
            _ = backend.list_branches(DIRECTORY)

    def test_records_calls(self) -> None:
        backend = FakeGitBackend(
            responses={"is_repository": True, "list_branches": BranchListing()}
        )

        _ = backend.is_repository(DIRECTORY)
        _ = backend.list_branches(DIRECTORY)

        assert backend.calls == [
            ("is_repository", DIRECTORY),
            ("list_branches", DIRECTORY),
        ]
        assert backend.called("is_repository") == 1
