from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from promptgit.cli import create_app

type CliRunner = Callable[..., int]


@pytest.fixture
def cli_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate config discovery, logging, and the cache under ``tmp_path``."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(
        "promptgit.config._discovery.get_user_config_file",
        lambda: home / "config.toml",
    )
    monkeypatch.setenv("PROMPTGIT_LOGGING__FILE", str(home / "cli.log"))
    monkeypatch.setenv("PROMPTGIT_CACHE__DIR", str(home / "cache"))
    monkeypatch.setenv("PROMPTGIT_DISPLAY__NO_EMOJI", "true")
    monkeypatch.chdir(home)
    return home


@pytest.fixture
def promptgit_cli(console: Console, cli_home: Path) -> CliRunner:  # noqa: ARG001
    """Run the CLI through its global-option layer and return the exit code."""
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app.meta(list(args))
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        return 0

    return _run
