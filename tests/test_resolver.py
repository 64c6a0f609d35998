"""Tests for the cache → live → stale cache → fallback resolution chain."""

import http.client
from functools import partial
from unittest.mock import patch

import pytest

from llmcost.config import LLMCostConfig
from llmcost.core.models import DataSource
from llmcost.pricing import resolver as resolver_module
from llmcost.pricing.cache import CacheStore
from llmcost.pricing.fallback import FALLBACK_MODELS
from llmcost.pricing.fetcher import FetchError, fetch_models
from llmcost.pricing.resolver import PricingResolver, build_resolver, resolve_models

from conftest import make_model, raw_record

HOUR = 60 * 60


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class RecordingFetch:
    """Fetch stand-in that returns canned records or raises."""

    def __init__(self, records=None, error: Exception | None = None):
        self.records = records or []
        self.error = error
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.records


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(tmp_path, clock):
    return CacheStore(tmp_path / "models.json", clock=clock)


LIVE_RECORDS = [
    raw_record("openai/gpt-live", "0.000001", "0.000002"),
    raw_record("anthropic/claude-live", "0.000003", "0.000015"),
]


class TestResolve:
    def test_fresh_cache_wins_without_network(self, cache):
        cache.write([make_model("openai/cached")])
        fetch = RecordingFetch(LIVE_RECORDS)
        result = PricingResolver(cache, fetch).resolve()
        assert result.source == DataSource.CACHE
        assert [m.id for m in result.models] == ["openai/cached"]
        assert fetch.calls == 0

    def test_live_fetch_when_no_cache(self, cache):
        fetch = RecordingFetch(LIVE_RECORDS)
        result = PricingResolver(cache, fetch).resolve()
        assert result.source == DataSource.LIVE
        assert [m.id for m in result.models] == ["anthropic/claude-live", "openai/gpt-live"]
        assert fetch.calls == 1

    def test_live_result_is_persisted(self, cache):
        PricingResolver(cache, RecordingFetch(LIVE_RECORDS)).resolve()
        snapshot = cache.read()
        assert snapshot is not None
        assert len(snapshot.models) == 2

    def test_force_refresh_bypasses_fresh_cache(self, cache):
        cache.write([make_model("openai/cached")])
        fetch = RecordingFetch(LIVE_RECORDS)
        result = PricingResolver(cache, fetch).resolve(force_refresh=True)
        assert result.source == DataSource.LIVE
        assert fetch.calls == 1

    def test_expired_cache_triggers_fetch(self, cache, clock):
        cache.write([make_model("openai/cached")])
        clock.now += 7 * HOUR
        result = PricingResolver(cache, RecordingFetch(LIVE_RECORDS)).resolve()
        assert result.source == DataSource.LIVE

    @pytest.mark.parametrize(
        "error",
        [FetchError("timed out"), OSError("network down"), ValueError("bad json")],
    )
    def test_stale_cache_after_fetch_failure(self, cache, clock, error):
        cache.write([make_model("openai/old")])
        clock.now += 30 * HOUR
        result = PricingResolver(cache, RecordingFetch(error=error)).resolve()
        assert result.source == DataSource.STALE_CACHE
        assert [m.id for m in result.models] == ["openai/old"]

    def test_fallback_when_fetch_fails_and_no_cache(self, cache):
        result = PricingResolver(cache, RecordingFetch(error=FetchError("offline"))).resolve()
        assert result.source == DataSource.FALLBACK
        assert result.models == list(FALLBACK_MODELS)

    def test_fallback_when_cache_corrupt(self, cache):
        cache.path.write_text("{not json")
        result = PricingResolver(cache, RecordingFetch(error=FetchError("offline"))).resolve()
        assert result.source == DataSource.FALLBACK

    def test_empty_live_result_falls_through(self, cache):
        fetch = RecordingFetch([raw_record("openai/free", "0", "0")])
        result = PricingResolver(cache, fetch).resolve()
        assert result.source == DataSource.FALLBACK
        assert not cache.path.exists()

    def test_failed_cache_write_still_returns_live(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        cache = CacheStore(blocker / "models.json")
        result = PricingResolver(cache, RecordingFetch(LIVE_RECORDS)).resolve()
        assert result.source == DataSource.LIVE

    def test_failed_fetch_leaves_cache_untouched(self, cache, clock):
        cache.write([make_model("openai/old")])
        before = cache.path.read_text()
        clock.now += 30 * HOUR
        PricingResolver(cache, RecordingFetch(error=FetchError("offline"))).resolve()
        assert cache.path.read_text() == before


class TestMalformedUpstream:
    """Bad upstream data degrades the result, never raises."""

    @pytest.mark.parametrize(
        "bad",
        [
            raw_record("openai/bad", name=123),
            raw_record("openai/bad", supported_parameters=5),
            raw_record("openai/bad", architecture={"input_modalities": "image"}),
            raw_record("openai/bad", "NaN", "NaN"),
        ],
    )
    def test_bad_record_skipped_batch_stays_live(self, cache, bad):
        fetch = RecordingFetch([raw_record("openai/good"), bad])
        result = PricingResolver(cache, fetch).resolve()
        assert result.source == DataSource.LIVE
        assert [m.id for m in result.models] == ["openai/good"]
        assert cache.read() is not None

    def test_nan_price_keeps_record_live(self, cache):
        fetch = RecordingFetch(
            [raw_record("openai/good"), raw_record("openai/half", "NaN", "0.000001")]
        )
        result = PricingResolver(cache, fetch).resolve()
        assert result.source == DataSource.LIVE
        assert {m.id for m in result.models} == {"openai/good", "openai/half"}

    def test_unexpected_normalization_error_degrades(self, cache, clock, monkeypatch):
        def broken(records):
            raise RuntimeError("unexpected shape")

        monkeypatch.setattr(resolver_module, "normalize_records", broken)
        cache.write([make_model("openai/old")])
        clock.now += 30 * HOUR
        result = PricingResolver(cache, RecordingFetch(LIVE_RECORDS)).resolve()
        assert result.source == DataSource.STALE_CACHE

    def test_truncated_response_falls_back(self, cache):
        fetch = partial(fetch_models, "https://openrouter.ai/api/v1/models")
        with patch("urllib.request.urlopen", side_effect=http.client.IncompleteRead(b"")):
            result = PricingResolver(cache, fetch).resolve()
        assert result.source == DataSource.FALLBACK


class TestFallbackTable:
    def test_has_fifteen_models(self):
        assert len(FALLBACK_MODELS) == 15

    def test_ids_unique_and_priced(self):
        assert len({m.id for m in FALLBACK_MODELS}) == len(FALLBACK_MODELS)
        assert all(m.input > 0 and m.output > 0 for m in FALLBACK_MODELS)


class TestBuildResolver:
    def test_uses_configured_cache_location(self, tmp_path):
        config = LLMCostConfig(cache_dir=tmp_path / "custom", cache_ttl_hours=1)
        resolver = build_resolver(config)
        assert resolver.cache.path == tmp_path / "custom" / "models.json"
        assert resolver.cache.ttl_seconds == HOUR

    def test_resolve_models_degrades_to_fallback_offline(self, tmp_path, monkeypatch):
        def offline(url, timeout):
            raise FetchError("offline")

        monkeypatch.setattr(resolver_module, "fetch_models", offline)
        result = resolve_models(config=LLMCostConfig(cache_dir=tmp_path / "empty"))
        assert result.source == DataSource.FALLBACK
        assert len(result.models) == 15
