"""Tests for promptgit.config._models section models."""

import pytest
from pydantic import ValidationError

from promptgit.config import (
    ASCII_SYMBOLS,
    NERD_FONT_SYMBOLS,
    CacheConfiguration,
    GitBackendName,
    GitConfiguration,
    SymbolConfig,
)


class TestGitConfiguration:
    def test_defaults(self) -> None:
        config = GitConfiguration()

        assert config.disabled is False
        assert config.repo_check_timeout_ms == 5000
        assert config.backend == GitBackendName.CLI

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            GitConfiguration().disabled = True  # pyright: ignore[reportAttributeAccessIssue]

    def test_backend_from_string(self) -> None:
        assert GitConfiguration.model_validate({"backend": "dulwich"}).backend == (
            GitBackendName.DULWICH
        )


class TestCacheConfiguration:
    def test_zero_ttl_allowed(self) -> None:
        assert CacheConfiguration(ttl_seconds=0).ttl_seconds == 0


class TestSymbolConfig:
    def test_nerd_font_defaults(self) -> None:
        assert NERD_FONT_SYMBOLS == SymbolConfig()
        assert NERD_FONT_SYMBOLS.git == "\uf418"
        assert NERD_FONT_SYMBOLS.conflict == "×"
        assert NERD_FONT_SYMBOLS.stashed == "⚑"
        assert NERD_FONT_SYMBOLS.deleted == "✘"

    def test_ascii_set(self) -> None:
        assert ASCII_SYMBOLS.model_dump() == {
            "git": "@",
            "staged": "+",
            "conflict": "C",
            "stashed": "$",
            "ahead": "A",
            "behind": "B",
            "diverged": "D",
            "renamed": ">",
            "deleted": "X",
        }
