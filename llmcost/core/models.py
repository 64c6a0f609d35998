"""Canonical data types for resolved model pricing.

Model field names are snake_case in Python. The cache file keeps the
camelCase keys (maxOutput, imageOut, structuredOutput, cacheRead,
cacheWrite, thinkingCost), and both spellings are accepted on load.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """A priceable model, normalized from an aggregator record.

    Prices are USD per million tokens. For the optional extras, None means
    the price is not offered at all, which is different from a zero price.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str
    provider: str
    name: str
    input: float = Field(ge=0)
    output: float = Field(ge=0)
    context: int = Field(default=0, ge=0)  # 0 = unknown
    max_output: int = Field(default=0, ge=0)  # 0 = unknown

    # Modalities
    vision: bool = False
    audio: bool = False
    video: bool = False
    image_out: bool = False

    # Capabilities
    tools: bool = False
    reasoning: bool = False
    structured_output: bool = False

    # Extra pricing
    cache_read: float | None = Field(default=None, ge=0)
    cache_write: float | None = Field(default=None, ge=0)
    thinking_cost: float | None = Field(default=None, ge=0)

    description: str = Field(default="", max_length=200)

    @property
    def blended_price(self) -> float:
        """Input + output price per 1M tokens (1:1 weighting)."""
        return self.input + self.output


class CostBreakdown(BaseModel, frozen=True):
    """Cost of a single request, in USD."""

    input_cost: float
    output_cost: float
    total_cost: float


class CacheSnapshot(BaseModel):
    """Timestamped list of models as persisted in the cache file."""

    timestamp: int  # epoch milliseconds
    models: list[Model]


class DataSource(str, Enum):
    """Which tier of the resolution chain supplied the models."""

    LIVE = "live"
    CACHE = "cache"
    STALE_CACHE = "stale-cache"
    FALLBACK = "fallback"

    @property
    def label(self) -> str:
        return _SOURCE_LABELS[self]


_SOURCE_LABELS = {
    DataSource.LIVE: "live from OpenRouter",
    DataSource.CACHE: "cached",
    DataSource.STALE_CACHE: "stale cache (offline)",
    DataSource.FALLBACK: "offline fallback",
}


class ResolvedSet(BaseModel):
    """Resolver output. ``source`` is informational only."""

    models: list[Model]
    source: DataSource
