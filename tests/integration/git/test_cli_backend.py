"""Integration tests for CliGitBackend against real repositories."""

import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from promptgit.exceptions import GitQueryError
from promptgit.git import CliGitBackend, parse_left_right, parse_status

type Git = Callable[..., str]


@pytest.fixture
def backend() -> CliGitBackend:
    return CliGitBackend()


class TestRepositoryCheck:
    def test_repository(self, backend: CliGitBackend, git_repo: Path) -> None:
        assert backend.is_repository(git_repo) is True

    def test_subdirectory(self, backend: CliGitBackend, git_repo: Path) -> None:
        subdir = git_repo / "src" / "pkg"
        subdir.mkdir(parents=True)

        assert backend.is_repository(subdir) is True

    def test_plain_directory(
        self, backend: CliGitBackend, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
        plain = tmp_path / "plain"
        plain.mkdir()

        assert backend.is_repository(plain) is False

    def test_missing_executable(self, git_repo: Path) -> None:
        backend = CliGitBackend(executable="git-does-not-exist-xyz")

        with pytest.raises(GitQueryError):
            _ = backend.is_repository(git_repo)


class TestBranchQueries:
    def test_current_branch(self, backend: CliGitBackend, git_repo: Path) -> None:
        assert backend.show_current_branch(git_repo).strip() == "main"
        assert backend.abbrev_ref_head(git_repo).strip() == "main"

    def test_list_branches(
        self, backend: CliGitBackend, git_repo: Path, git: Git
    ) -> None:
        _ = git(git_repo, "branch", "feature")

        listing = backend.list_branches(git_repo)

        assert listing.current == "main"
        assert set(listing.branches) == {"feature", "main"}

    def test_detached_head(
        self, backend: CliGitBackend, git_repo: Path, git: Git
    ) -> None:
        _ = git(git_repo, "checkout", "--quiet", "--detach")

        assert backend.show_current_branch(git_repo).strip() == ""
        assert backend.abbrev_ref_head(git_repo).strip() == "HEAD"
        assert backend.list_branches(git_repo).current is None


class TestStatus:
    def test_clean(self, backend: CliGitBackend, git_repo: Path) -> None:
        assert backend.status_porcelain(git_repo) == ""

    def test_working_tree_changes(
        self, backend: CliGitBackend, git_repo: Path, git: Git
    ) -> None:
        _ = (git_repo / "tracked.txt").write_text("one\n")
        _ = (git_repo / "doomed.txt").write_text("bye\n")
        _ = (git_repo / "moved.txt").write_text("move me\n")
        _ = git(git_repo, "add", ".")
        _ = git(git_repo, "commit", "--quiet", "-m", "Add files")

        _ = (git_repo / "README.md").write_text("# changed\n")
        _ = (git_repo / "staged.txt").write_text("new\n")
        _ = git(git_repo, "add", "staged.txt")
        _ = git(git_repo, "rm", "--quiet", "doomed.txt")
        _ = git(git_repo, "mv", "moved.txt", "renamed.txt")
        _ = (git_repo / "untracked.txt").write_text("?\n")

        indicators = parse_status(backend.status_porcelain(git_repo))

        assert indicators.modified == 1
        assert indicators.staged == 1
        assert indicators.deleted == 1
        assert indicators.renamed == 1
        assert indicators.untracked == 1
        assert indicators.conflicts == 0

    def test_unstaged_first_line_is_not_staged(
        self, backend: CliGitBackend, git_repo: Path
    ) -> None:
        _ = (git_repo / "README.md").write_text("# changed\n")

        output = backend.status_porcelain(git_repo)

        assert output.startswith(" M")
        assert parse_status(output).staged == 0

    def test_merge_conflict(
        self, backend: CliGitBackend, git_repo: Path, git: Git
    ) -> None:
        _ = git(git_repo, "checkout", "--quiet", "-b", "other")
        _ = (git_repo / "README.md").write_text("other side\n")
        _ = git(git_repo, "commit", "--quiet", "-am", "Other")
        _ = git(git_repo, "checkout", "--quiet", "main")
        _ = (git_repo / "README.md").write_text("main side\n")
        _ = git(git_repo, "commit", "--quiet", "-am", "Main")
        with pytest.raises(subprocess.CalledProcessError):
            _ = git(git_repo, "merge", "--quiet", "other")

        assert parse_status(backend.status_porcelain(git_repo)).conflicts == 1


class TestStashAndUpstream:
    def test_stash_list(self, backend: CliGitBackend, git_repo: Path, git: Git) -> None:
        _ = (git_repo / "README.md").write_text("wip\n")
        _ = git(git_repo, "stash", "--quiet")

        assert len(backend.stash_list(git_repo).splitlines()) == 1

    def test_no_upstream(self, backend: CliGitBackend, git_repo: Path) -> None:
        with pytest.raises(GitQueryError) as exc_info:
            _ = backend.upstream_ref(git_repo)

        assert exc_info.value.exit_code is not None

    def test_ahead_behind(
        self, backend: CliGitBackend, tracked_repo: Path, git: Git
    ) -> None:
        assert backend.upstream_ref(tracked_repo).strip() == "origin/main"

        _ = (tracked_repo / "a.txt").write_text("a\n")
        _ = git(tracked_repo, "add", "a.txt")
        _ = git(tracked_repo, "commit", "--quiet", "-m", "Local")

        counts = parse_left_right(backend.rev_list_left_right(tracked_repo))

        assert (counts.ahead, counts.behind) == (1, 0)
