"""Tests for promptgit.config._discovery module."""

from pathlib import Path

import pytest

from promptgit.config import (
    PROJECT_CONFIG_FILENAME,
    ConfigSourceName,
    discover_sources,
    find_project_config,
)


@pytest.fixture
def user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "user" / "config.toml"
    monkeypatch.setattr(
        "promptgit.config._discovery.get_user_config_file", lambda: path
    )
    return path


class TestFindProjectConfig:
    def test_in_start_directory(self, tmp_path: Path) -> None:
        path = tmp_path / PROJECT_CONFIG_FILENAME
        _ = path.write_text("")

        assert find_project_config(tmp_path) == path.resolve()

    def test_in_parent_directory(self, tmp_path: Path) -> None:
        path = tmp_path / PROJECT_CONFIG_FILENAME
        _ = path.write_text("")
        child = tmp_path / "child"
        child.mkdir()

        assert find_project_config(child) == path.resolve()

    def test_not_in_grandparent(self, tmp_path: Path) -> None:
        _ = (tmp_path / PROJECT_CONFIG_FILENAME).write_text("")
        grandchild = tmp_path / "a" / "b"
        grandchild.mkdir(parents=True)

        assert find_project_config(grandchild) is None

    def test_start_directory_wins(self, tmp_path: Path) -> None:
        _ = (tmp_path / PROJECT_CONFIG_FILENAME).write_text("")
        child = tmp_path / "child"
        child.mkdir()
        nearest = child / PROJECT_CONFIG_FILENAME
        _ = nearest.write_text("")

        assert find_project_config(child) == nearest.resolve()


class TestDiscoverSources:
    def test_precedence_order(self, tmp_path: Path, user_config: Path) -> None:
        _ = (tmp_path / PROJECT_CONFIG_FILENAME).write_text("")

        sources = discover_sources(tmp_path, include_cli=True, cli_overrides={"a": 1})

        assert [source.name for source in sources] == [
            ConfigSourceName.CLI,
            ConfigSourceName.ENV,
            ConfigSourceName.PROJECT,
            ConfigSourceName.USER,
            ConfigSourceName.DEFAULT,
        ]
        assert sources[3].path == user_config
        assert sources[3].exists is False

    def test_without_project_or_env(self, tmp_path: Path, user_config: Path) -> None:
        user_config.parent.mkdir(parents=True)
        _ = user_config.write_text("")

        sources = discover_sources(tmp_path, include_env=False)

        assert [source.name for source in sources] == [
            ConfigSourceName.USER,
            ConfigSourceName.DEFAULT,
        ]
        assert sources[0].exists is True
