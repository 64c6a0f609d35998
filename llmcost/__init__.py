"""llm-cost: compare LLM API costs across providers with live pricing.

Package use:
    from llmcost import resolve_models, calculate_cost

    resolved = resolve_models()
    for model in resolved.models[:5]:
        print(model.name, calculate_cost(model, 1000, 2000).total_cost)
"""

__version__ = "1.2.0"

from .config import LLMCostConfig, get_config  # noqa: E402
from .core import (  # noqa: E402
    CacheSnapshot,
    CostBreakdown,
    DataSource,
    Model,
    ResolvedSet,
    calculate_cost,
    estimate_tokens,
    monthly_cost,
)
from .pricing import CacheStore, PricingResolver, resolve_models  # noqa: E402

__all__ = [
    "__version__",
    "LLMCostConfig",
    "get_config",
    "Model",
    "CostBreakdown",
    "CacheSnapshot",
    "DataSource",
    "ResolvedSet",
    "calculate_cost",
    "monthly_cost",
    "estimate_tokens",
    "CacheStore",
    "PricingResolver",
    "resolve_models",
]
