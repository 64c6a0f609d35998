"""Model pricing resolution.

Four-tier resolution, first hit wins:
1. Fresh local cache (~/.llm-cost/models.json, 6h TTL), unless refreshing
2. OpenRouter API (free, no auth, covers 200+ models) → written to cache
3. Stale local cache, ignoring the TTL (offline)
4. Hardcoded fallback table

Every tier absorbs its own failures, so resolution always returns a
ResolvedSet. The ``source`` tag records which tier supplied the data.
"""

import logging
from collections.abc import Callable, Sequence
from functools import partial
from typing import Any

from ..config import LLMCostConfig, get_config
from ..core.models import DataSource, Model, ResolvedSet
from .cache import CacheStore
from .fallback import FALLBACK_MODELS
from .fetcher import FetchError, fetch_models
from .normalizer import normalize_records

logger = logging.getLogger(__name__)

Fetcher = Callable[[], list[dict[str, Any]]]


class PricingResolver:
    """Runs the cache → live → stale cache → fallback chain."""

    def __init__(
        self,
        cache: CacheStore,
        fetch: Fetcher,
        fallback: Sequence[Model] = FALLBACK_MODELS,
    ) -> None:
        self.cache = cache
        self._fetch = fetch
        self._fallback = list(fallback)

    # ── Tiers ────────────────────────────────────────────────────────────

    def _from_fresh_cache(self) -> ResolvedSet | None:
        snapshot = self.cache.read()
        if snapshot is None:
            return None
        return ResolvedSet(models=snapshot.models, source=DataSource.CACHE)

    def _from_live(self) -> ResolvedSet | None:
        try:
            records = self._fetch()
        except (FetchError, ValueError, OSError) as e:
            logger.info(f"Live pricing unavailable: {e}")
            return None

        try:
            models = normalize_records(records)
        except Exception as e:
            logger.warning(f"Could not parse live pricing: {e}")
            return None

        if not models:
            logger.info("Live pricing returned no priceable models")
            return None

        self.cache.write(models)
        return ResolvedSet(models=models, source=DataSource.LIVE)

    def _from_stale_cache(self) -> ResolvedSet | None:
        snapshot = self.cache.read_stale()
        if snapshot is None:
            return None
        return ResolvedSet(models=snapshot.models, source=DataSource.STALE_CACHE)

    def _from_fallback(self) -> ResolvedSet:
        return ResolvedSet(models=list(self._fallback), source=DataSource.FALLBACK)

    # ── Resolution ───────────────────────────────────────────────────────

    def resolve(self, force_refresh: bool = False) -> ResolvedSet:
        """Resolve the model list.

        Args:
            force_refresh: Skip the fresh-cache tier and go to the network.

        Returns:
            ResolvedSet from the first tier that produced models.
        """
        attempts: list[Callable[[], ResolvedSet | None]] = []
        if not force_refresh:
            attempts.append(self._from_fresh_cache)
        attempts.extend([self._from_live, self._from_stale_cache])

        for attempt in attempts:
            result = attempt()
            if result is not None:
                logger.debug(
                    f"Resolved {len(result.models)} models from {result.source.value}"
                )
                return result

        logger.info("No live or cached pricing available, using fallback table")
        return self._from_fallback()


def build_resolver(config: LLMCostConfig | None = None) -> PricingResolver:
    """Create a resolver wired to the configured cache file and endpoint."""
    config = config or get_config()
    cache = CacheStore(config.cache_file, ttl_seconds=config.cache_ttl_seconds)
    fetch = partial(fetch_models, config.source_url, timeout=config.fetch_timeout)
    return PricingResolver(cache, fetch)


def resolve_models(
    force_refresh: bool = False,
    config: LLMCostConfig | None = None,
) -> ResolvedSet:
    """Resolve models using the process configuration."""
    return build_resolver(config).resolve(force_refresh=force_refresh)
