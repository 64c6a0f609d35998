"""Shared fixtures: isolate every test from the real ~/.llm-cost cache."""

import pytest

from llmcost.config import reset_config
from llmcost.core.models import Model


@pytest.fixture(autouse=True)
def isolated_cache(tmp_path, monkeypatch):
    """Point the cache dir at a temp dir and start each test with fresh config."""
    cache_dir = tmp_path / "llm-cost-cache"
    monkeypatch.setenv("LLM_COST_CACHE_DIR", str(cache_dir))
    monkeypatch.setattr("llmcost.config.CONFIG_FILE", tmp_path / "no-config.json")
    reset_config()
    yield cache_dir
    reset_config()


def make_model(model_id: str = "openai/gpt-test", **overrides) -> Model:
    """Build a Model with sensible defaults for tests."""
    fields = {
        "id": model_id,
        "provider": "OpenAI",
        "name": model_id.split("/")[-1],
        "input": 1.0,
        "output": 2.0,
        "context": 128_000,
        "max_output": 4096,
    }
    fields.update(overrides)
    return Model(**fields)


def raw_record(model_id: str, prompt="0.000001", completion="0.000002", **extra) -> dict:
    """Build a raw OpenRouter-style record."""
    record = {
        "id": model_id,
        "name": extra.pop("name", model_id.split("/")[-1]),
        "pricing": {"prompt": prompt, "completion": completion},
    }
    record.update(extra)
    return record
