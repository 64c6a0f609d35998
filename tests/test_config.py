"""Tests for config layering (defaults → file → env)."""

import json
from pathlib import Path

from llmcost.config import (
    DEFAULT_CACHE_DIR,
    LLMCostConfig,
    get_config,
    reset_config,
)


class TestDefaults:
    def test_defaults(self):
        config = LLMCostConfig()
        assert config.cache_dir == DEFAULT_CACHE_DIR
        assert config.cache_file == DEFAULT_CACHE_DIR / "models.json"
        assert config.cache_ttl_seconds == 6 * 60 * 60
        assert config.fetch_timeout == 8.0
        assert config.source_url == "https://openrouter.ai/api/v1/models"


class TestLoad:
    def test_config_file_values(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LLM_COST_CACHE_DIR", raising=False)
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"cache_dir": str(tmp_path / "c"), "cache_ttl_hours": 1, "fetch_timeout": 2})
        )
        config = LLMCostConfig.load(path)
        assert config.cache_dir == tmp_path / "c"
        assert config.cache_ttl_hours == 1.0
        assert config.fetch_timeout == 2.0

    def test_env_beats_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"fetch_timeout": 2, "source_url": "http://file"}))
        monkeypatch.setenv("LLM_COST_FETCH_TIMEOUT", "3.5")
        monkeypatch.setenv("LLM_COST_SOURCE_URL", "http://env")
        config = LLMCostConfig.load(path)
        assert config.fetch_timeout == 3.5
        assert config.source_url == "http://env"

    def test_malformed_file_ignored(self, tmp_path, caplog):
        path = tmp_path / "config.json"
        path.write_text("{oops")
        with caplog.at_level("WARNING"):
            config = LLMCostConfig.load(path)
        assert config.fetch_timeout == 8.0
        assert "Failed to load config" in caplog.text

    def test_invalid_env_number_ignored(self, tmp_path, monkeypatch, caplog):
        monkeypatch.setenv("LLM_COST_CACHE_TTL_HOURS", "soon")
        with caplog.at_level("WARNING"):
            config = LLMCostConfig.load(tmp_path / "missing.json")
        assert config.cache_ttl_hours == 6.0
        assert "LLM_COST_CACHE_TTL_HOURS" in caplog.text

    def test_cache_dir_env(self, isolated_cache):
        config = LLMCostConfig.load(Path("/nonexistent/config.json"))
        assert config.cache_file == isolated_cache / "models.json"


class TestSingleton:
    def test_get_config_cached_until_reset(self, monkeypatch, tmp_path):
        first = get_config()
        assert get_config() is first
        monkeypatch.setenv("LLM_COST_CACHE_DIR", str(tmp_path / "other"))
        assert get_config().cache_dir == first.cache_dir
        reset_config()
        assert get_config().cache_dir == tmp_path / "other"
