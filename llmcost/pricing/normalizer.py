"""Convert raw OpenRouter model records into canonical Models.

OpenRouter returns prices as stringified USD-per-token decimals, e.g.
``{"prompt": "0.000003", "completion": "0.000015"}``. They are converted
to USD per million tokens and rounded to 4 decimals.
"""

import logging
import math
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from ..core.models import Model
from ..core.providers import clean_name, provider_for

logger = logging.getLogger(__name__)

# Routing products that aggregate other models (e.g. "openrouter/auto")
EXCLUDED_PREFIX = "openrouter/"

DESCRIPTION_LIMIT = 200


def _per_token(value: Any) -> float | None:
    """Parse a per-token price, or None if missing, unparseable or non-finite."""
    if value is None or value == "":
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    return price if math.isfinite(price) else None


def _per_million(per_token: float) -> float:
    return round(per_token * 1_000_000, 4)


def _extra_price(pricing: dict, key: str) -> float | None:
    """Convert an optional extra price; None means not offered."""
    per_token = _per_token(pricing.get(key))
    if per_token is None:
        return None
    return _per_million(per_token)


def _dict_field(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _int_field(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value


def normalize(raw: dict[str, Any], seen: set[str]) -> Model | None:
    """Normalize one raw record.

    Args:
        raw: Raw OpenRouter model record
        seen: Ids already emitted in this batch; updated when a Model is emitted

    Returns:
        Model, or None if the record should be skipped (free, duplicate,
        meta-routing product, missing id, or malformed fields).
    """
    model_id = raw.get("id")
    if not isinstance(model_id, str) or not model_id:
        return None

    pricing = _dict_field(raw.get("pricing"))
    # Negative sentinel prices (e.g. "-1" for variable pricing) count as 0
    input_price = max(_per_million(_per_token(pricing.get("prompt")) or 0.0), 0.0)
    output_price = max(_per_million(_per_token(pricing.get("completion")) or 0.0), 0.0)

    if input_price == 0 and output_price == 0:
        return None
    if model_id in seen:
        return None
    if model_id.startswith(EXCLUDED_PREFIX):
        return None

    name = raw.get("name") or model_id.split("/")[-1]
    description = raw.get("description") or ""
    architecture = _dict_field(raw.get("architecture"))
    input_mods = architecture.get("input_modalities") or ["text"]
    output_mods = architecture.get("output_modalities") or ["text"]
    params = raw.get("supported_parameters") or []
    if not isinstance(name, str) or not isinstance(description, str):
        logger.debug(f"Skipping {model_id}: non-string name or description")
        return None
    if not all(isinstance(v, list) for v in (input_mods, output_mods, params)):
        logger.debug(f"Skipping {model_id}: malformed modalities or parameters")
        return None

    provider = provider_for(model_id)
    top_provider = _dict_field(raw.get("top_provider"))

    model = Model(
        id=model_id,
        provider=provider,
        name=clean_name(name, provider),
        input=input_price,
        output=output_price,
        context=_int_field(raw.get("context_length")),
        max_output=_int_field(top_provider.get("max_completion_tokens")),
        vision="image" in input_mods,
        audio="audio" in input_mods,
        video="video" in input_mods,
        image_out="image" in output_mods,
        tools="tools" in params,
        reasoning="reasoning" in params or "include_reasoning" in params,
        structured_output="structured_outputs" in params,
        cache_read=_non_negative(_extra_price(pricing, "input_cache_read")),
        cache_write=_non_negative(_extra_price(pricing, "input_cache_write")),
        thinking_cost=_non_negative(_extra_price(pricing, "internal_reasoning")),
        description=description[:DESCRIPTION_LIMIT],
    )
    seen.add(model_id)
    return model


def _non_negative(price: float | None) -> float | None:
    if price is None or price < 0:
        return None
    return price


def normalize_records(records: Iterable[Any]) -> list[Model]:
    """Normalize a batch, dropping skips and duplicates.

    The result is stably sorted by provider name, then input price, so
    models with equal keys keep the aggregator's order.
    """
    seen: set[str] = set()
    models: list[Model] = []
    skipped = 0
    for raw in records:
        if not isinstance(raw, dict):
            skipped += 1
            continue
        try:
            model = normalize(raw, seen)
        except ValidationError as e:
            logger.debug(f"Skipping invalid record {raw.get('id')!r}: {e}")
            model = None
        if model is None:
            skipped += 1
            continue
        models.append(model)

    models.sort(key=lambda m: (m.provider.casefold(), m.input))
    logger.debug(f"Normalized {len(models)} models ({skipped} skipped)")
    return models
