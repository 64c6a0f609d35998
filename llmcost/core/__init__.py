"""Core types, provider lookup, and cost arithmetic."""

from .models import CacheSnapshot, CostBreakdown, DataSource, Model, ResolvedSet
from .providers import PROVIDER_NAMES, clean_name, provider_for
from .cost import (
    calculate_cost,
    estimate_tokens,
    monthly_cost,
    resolve_token_counts,
)

__all__ = [
    # Models
    "Model",
    "CostBreakdown",
    "CacheSnapshot",
    "DataSource",
    "ResolvedSet",
    # Providers
    "PROVIDER_NAMES",
    "provider_for",
    "clean_name",
    # Cost
    "calculate_cost",
    "monthly_cost",
    "estimate_tokens",
    "resolve_token_counts",
]
