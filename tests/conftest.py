"""Shared test fixtures for promptgit tests."""

from pathlib import Path

import pytest
from rich.console import Console

from promptgit.git import FakeGitBackend
from promptgit.utils import MemoryCache


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_cache(clock: FakeClock) -> MemoryCache:
    return MemoryCache(clock=clock)


@pytest.fixture
def fake_backend() -> FakeGitBackend:
    """Backend scripted as a clean repository on ``main`` with no upstream."""
    return FakeGitBackend(
        responses={
            "is_repository": True,
            "show_current_branch": "main\n",
            "status_porcelain": "",
            "stash_list": "",
        }
    )


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "repo"
    directory.mkdir()
    return directory


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
