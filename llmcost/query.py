"""Filtering, sorting, and use-case recommendations over a model list.

Everything here is a pure function of the resolved model list; nothing
touches the network or the cache.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .core.cost import calculate_cost, monthly_cost
from .core.models import CostBreakdown, Model


# =============================================================================
# Filtering
# =============================================================================


class ModelFilter(BaseModel):
    """AND-combined model predicates. Unset fields match everything.

    ``models`` and ``providers`` are any-of lists of case-insensitive
    substrings; ``models`` is matched against id and name, ``providers``
    against the provider display name.
    """

    models: list[str] | None = None
    providers: list[str] | None = None
    vision: bool = False
    audio: bool = False
    tools: bool = False
    reasoning: bool = False
    structured_output: bool = False
    min_context: int | None = None

    def matches(self, model: Model) -> bool:
        if self.models:
            model_id = model.id.lower()
            name = model.name.lower()
            if not any(q.lower() in model_id or q.lower() in name for q in self.models):
                return False
        if self.providers:
            provider = model.provider.lower()
            if not any(p.lower() in provider for p in self.providers):
                return False
        if self.vision and not model.vision:
            return False
        if self.audio and not model.audio:
            return False
        if self.tools and not model.tools:
            return False
        if self.reasoning and not model.reasoning:
            return False
        if self.structured_output and not model.structured_output:
            return False
        if self.min_context and model.context < self.min_context:
            return False
        return True


def parse_list(value: str | None) -> list[str] | None:
    """Split a comma-separated CLI value into lowercase terms."""
    if not value:
        return None
    terms = [part.strip().lower() for part in value.split(",")]
    return [t for t in terms if t] or None


def filter_models(models: Sequence[Model], flt: ModelFilter) -> list[Model]:
    """Return models matching the filter, in their input order."""
    return [m for m in models if flt.matches(m)]


def find_model(models: Sequence[Model], query: str) -> Model | None:
    """First model whose id or name contains ``query`` (case-insensitive)."""
    q = query.lower()
    for m in models:
        if q in m.id.lower() or q in m.name.lower():
            return m
    return None


# =============================================================================
# Costing and sorting
# =============================================================================


class CostedModel(BaseModel):
    """A model priced at specific token counts."""

    model_config = ConfigDict(frozen=True)

    model: Model
    cost: CostBreakdown
    monthly_cost: float | None = None

    @property
    def total_cost(self) -> float:
        return self.cost.total_cost


SORT_KEYS: tuple[str, ...] = ("cost", "input", "output", "name", "context")


def price_models(
    models: Sequence[Model],
    input_tokens: int,
    output_tokens: int,
    monthly_requests: int | None = None,
) -> list[CostedModel]:
    """Attach a per-request (and optional monthly) cost to each model."""
    rows = []
    for m in models:
        cost = calculate_cost(m, input_tokens, output_tokens)
        rows.append(
            CostedModel(
                model=m,
                cost=cost,
                monthly_cost=monthly_cost(cost, monthly_requests)
                if monthly_requests
                else None,
            )
        )
    return rows


_SORTERS: dict[str, tuple[Callable[[CostedModel], object], bool]] = {
    "cost": (lambda r: r.total_cost, False),
    "input": (lambda r: r.model.input, False),
    "output": (lambda r: r.model.output, False),
    "name": (lambda r: r.model.name.lower(), False),
    "context": (lambda r: r.model.context, True),
}


def sort_results(rows: Sequence[CostedModel], key: str | None = "cost") -> list[CostedModel]:
    """Stable sort by key. Unknown keys sort by total cost ascending."""
    sort_key, descending = _SORTERS.get((key or "cost").lower(), _SORTERS["cost"])
    return sorted(rows, key=sort_key, reverse=descending)


def limit_results(
    rows: Sequence[CostedModel], top: int | None = None, cheap: bool = False
) -> list[CostedModel]:
    """Apply --top N (wins) or --cheap (5 rows)."""
    if top:
        return list(rows[:top])
    if cheap:
        return list(rows[:5])
    return list(rows)


def cost_ratio(cheapest: CostedModel, priciest: CostedModel) -> float:
    """How many times more the priciest row costs than the cheapest.

    Equal totals (including both zero) give 1.0.
    """
    low, high = cheapest.total_cost, priciest.total_cost
    if high == low:
        return 1.0
    if low == 0:
        return float("inf")
    return high / low


# =============================================================================
# Best-for recommendations
# =============================================================================


RankBy = Literal["price", "context", "max_output"]


@dataclass(frozen=True)
class UseCase:
    """A named recommendation category."""

    label: str
    qualifies: Callable[[Model], bool]
    rank_by: RankBy = "price"


@dataclass(frozen=True)
class Recommendation:
    use_case: UseCase
    model: Model | None  # None when nothing qualifies


USE_CASES: tuple[UseCase, ...] = (
    UseCase("Cheapest overall", lambda m: True),
    UseCase("Cheapest with vision", lambda m: m.vision),
    UseCase("Cheapest with tools", lambda m: m.tools),
    UseCase("Cheapest reasoning/CoT", lambda m: m.reasoning),
    UseCase("Cheapest JSON output", lambda m: m.structured_output),
    UseCase("Cheapest ≥128K context", lambda m: m.context >= 128_000),
    UseCase("Cheapest ≥1M context", lambda m: m.context >= 1_000_000),
    UseCase("Cheapest with audio", lambda m: m.audio),
    UseCase("Biggest context window", lambda m: True, rank_by="context"),
    UseCase("Biggest max output", lambda m: True, rank_by="max_output"),
)


def _pick(candidates: list[Model], rank_by: RankBy) -> Model:
    # min()/max() return the first extremal element, so ties keep list order
    if rank_by == "context":
        return max(candidates, key=lambda m: m.context or 0)
    if rank_by == "max_output":
        return max(candidates, key=lambda m: m.max_output or 0)
    # Price categories use a flat input + output sum, not the request's token mix
    return min(candidates, key=lambda m: m.blended_price)


def best_for(
    models: Sequence[Model], use_cases: Sequence[UseCase] = USE_CASES
) -> list[Recommendation]:
    """Pick the best model for each use case over the full list."""
    results = []
    for use_case in use_cases:
        candidates = [m for m in models if use_case.qualifies(m)]
        best = _pick(candidates, use_case.rank_by) if candidates else None
        results.append(Recommendation(use_case=use_case, model=best))
    return results
