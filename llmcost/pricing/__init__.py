"""Pricing acquisition: normalize, cache, fetch, and resolve.

This package provides:
- Normalizer: OpenRouter records → canonical Model
- CacheStore: Timestamped snapshot file (~/.llm-cost/models.json)
- PricingResolver: Four-tier resolution (cache → OpenRouter → stale cache → fallback)
"""

from .cache import CacheStore
from .fallback import FALLBACK_MODELS
from .fetcher import FetchError, fetch_models
from .normalizer import EXCLUDED_PREFIX, normalize, normalize_records
from .resolver import PricingResolver, build_resolver, resolve_models

__all__ = [
    # Normalizer
    "normalize",
    "normalize_records",
    "EXCLUDED_PREFIX",
    # Cache
    "CacheStore",
    # Fetch
    "fetch_models",
    "FetchError",
    # Resolution
    "PricingResolver",
    "build_resolver",
    "resolve_models",
    "FALLBACK_MODELS",
]
