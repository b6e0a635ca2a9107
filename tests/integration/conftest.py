import os
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(
    shutil.which("git") is None, reason="git executable not found"
)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)
            item.add_marker(requires_git)


type GitRunner = Callable[..., str]

# Isolate from the developer's git configuration
GIT_TEST_ENV: dict[str, str] = {
    **os.environ,
    "GIT_AUTHOR_NAME": "Test User",
    "GIT_AUTHOR_EMAIL": "test@example.com",
    "GIT_COMMITTER_NAME": "Test User",
    "GIT_COMMITTER_EMAIL": "test@example.com",
    "GIT_CONFIG_GLOBAL": os.devnull,
    "GIT_CONFIG_NOSYSTEM": "1",
}


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        check=True,
        text=True,
        env=GIT_TEST_ENV,
    )
    return result.stdout


def init_git_repo(path: Path, *, branch: str = "main") -> None:
    """Initialize a repository with one commit on ``branch``."""
    path.mkdir(parents=True, exist_ok=True)
    _ = _git(path, "init", "--quiet", f"--initial-branch={branch}")
    _ = _git(path, "config", "user.email", "test@example.com")
    _ = _git(path, "config", "user.name", "Test User")
    _ = _git(path, "config", "commit.gpgsign", "false")
    (path / "README.md").write_text("# test\n")
    _ = _git(path, "add", "README.md")
    _ = _git(path, "commit", "--quiet", "-m", "Initial commit")


@pytest.fixture
def git() -> GitRunner:
    """Run git in a directory and return stdout."""
    return _git


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Repository with a single commit on ``main``."""
    repo = tmp_path / "repo"
    init_git_repo(repo)
    return repo


@pytest.fixture
def tracked_repo(tmp_path: Path) -> Path:
    """Clone of a bare remote, tracking ``origin/main``."""
    seed = tmp_path / "seed"
    init_git_repo(seed)
    remote = tmp_path / "remote.git"
    _ = _git(tmp_path, "clone", "--quiet", "--bare", str(seed), str(remote))
    clone = tmp_path / "clone"
    _ = _git(tmp_path, "clone", "--quiet", str(remote), str(clone))
    _ = _git(clone, "config", "user.email", "test@example.com")
    _ = _git(clone, "config", "user.name", "Test User")
    _ = _git(clone, "config", "commit.gpgsign", "false")
    return clone
