"""Tests for environment-driven configuration."""
from __future__ import annotations

from pathlib import Path

import pytest

from lineage_search.config import SearchConfig


class TestSearchConfig:
    """Tests for SearchConfig defaults and overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        for var in ("LINEAGE_SEARCH_DATA_PATH", "LINEAGE_SEARCH_ANCESTRY_LIMIT", "LINEAGE_SEARCH_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        config = SearchConfig()
        assert config.data_path == Path("genealogy_graph.json")
        assert config.ancestry_limit == 1000
        assert config.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LINEAGE_SEARCH_DATA_PATH", "/data/mgp.json")
        monkeypatch.setenv("LINEAGE_SEARCH_ANCESTRY_LIMIT", "250")
        monkeypatch.setenv("LINEAGE_SEARCH_LOG_LEVEL", "debug")

        config = SearchConfig()
        assert config.data_path == Path("/data/mgp.json")
        assert config.ancestry_limit == 250
        assert config.log_level == "DEBUG"

    def test_invalid_values_fall_back(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LINEAGE_SEARCH_ANCESTRY_LIMIT", "lots")
        monkeypatch.setenv("LINEAGE_SEARCH_LOG_LEVEL", "chatty")

        config = SearchConfig()
        assert config.ancestry_limit == 1000
        assert config.log_level == "WARNING"

    def test_frozen(self):
        config = SearchConfig(ancestry_limit=5)
        with pytest.raises(AttributeError):
            config.ancestry_limit = 10  # type: ignore[misc]
