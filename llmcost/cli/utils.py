"""CLI utilities: exit codes, number formatting, and the JSON payload.

Formatting helpers are pure functions so both the rich renderers and the
tests can use them.
"""

from __future__ import annotations

from typing import Any

from ..core.models import DataSource, Model
from ..query import CostedModel


class ExitCode:
    """Standardized exit codes for the CLI.

        0 = Success
        1 = No models matched the filter or detail lookup
        2 = Invalid usage (raised by typer itself)
    """

    NO_MATCH = 1


def format_usd(n: float) -> str:
    """Format a USD amount: sub-cent precision below $1, cents above."""
    if n < 0.0001:
        return "<$0.0001"
    if n < 1:
        return f"${n:.4f}"
    return f"${n:.2f}"


def format_tokens(n: int) -> str:
    """Format a token count as 1.5K / 2.0M."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return str(n)


def format_context(n: int) -> str:
    """Format a context window; 0 (unknown) renders as a dash."""
    if not n:
        return "—"
    if n >= 1_000_000:
        decimals = 0 if n % 1_000_000 == 0 else 1
        return f"{n / 1_000_000:.{decimals}f}M"
    if n >= 1_000:
        return f"{n / 1_000:.0f}K"
    return str(n)


def caps_badge(model: Model) -> str:
    """Comma-separated capability tags for the table column."""
    tags = []
    if model.vision:
        tags.append("vision")
    if model.audio:
        tags.append("audio")
    if model.video:
        tags.append("video")
    if model.image_out:
        tags.append("img-out")
    if model.reasoning:
        tags.append("reasoning")
    if model.tools:
        tags.append("tools")
    if model.structured_output:
        tags.append("json")
    return ",".join(tags)


def caps_letters(model: Model) -> str:
    """Compact [VART] marker used by --list."""
    letters = ""
    if model.vision:
        letters += "V"
    if model.audio:
        letters += "A"
    if model.reasoning:
        letters += "R"
    if model.tools:
        letters += "T"
    return letters


def model_to_json(row: CostedModel) -> dict[str, Any]:
    """Serialize one priced row. Optional fields are omitted, never null."""
    m = row.model
    item: dict[str, Any] = {
        "id": m.id,
        "provider": m.provider,
        "name": m.name,
        "input_per_1m": m.input,
        "output_per_1m": m.output,
        "context_window": m.context,
    }
    if m.max_output:
        item["max_output"] = m.max_output
    item["estimated_cost"] = round(row.total_cost, 6)
    if row.monthly_cost is not None:
        item["monthly_cost"] = round(row.monthly_cost, 2)
    item["capabilities"] = {
        "vision": m.vision,
        "audio": m.audio,
        "tools": m.tools,
        "reasoning": m.reasoning,
        "structured_output": m.structured_output,
    }
    if m.cache_read:
        item["cache_read_per_1m"] = m.cache_read
    if m.cache_write:
        item["cache_write_per_1m"] = m.cache_write
    if m.thinking_cost:
        item["thinking_per_1m"] = m.thinking_cost
    return item


def build_json_payload(
    rows: list[CostedModel],
    *,
    input_tokens: int,
    output_tokens: int,
    source: DataSource,
    monthly_requests: int | None = None,
) -> dict[str, Any]:
    """Build the machine-readable comparison output."""
    payload: dict[str, Any] = {
        "input_tokens": input_tokens,
        "output_tokens": output_tokens,
        "source": source.label,
    }
    if monthly_requests:
        payload["monthly_requests"] = monthly_requests
    payload["models"] = [model_to_json(r) for r in rows]
    return payload
