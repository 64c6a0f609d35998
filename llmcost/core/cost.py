"""Per-request cost arithmetic.

All prices are USD per million tokens, so a request costs
``tokens / 1_000_000 * price`` for each direction.
"""

import math

from .models import CostBreakdown, Model

TOKENS_PER_MILLION = 1_000_000

# Defaults used when the caller gives neither token counts nor a prompt
DEFAULT_INPUT_TOKENS = 200
MIN_DEFAULT_OUTPUT_TOKENS = 300


def calculate_cost(model: Model, input_tokens: int, output_tokens: int) -> CostBreakdown:
    """Compute the cost of one request against a model.

    Args:
        model: Model with per-million input/output prices
        input_tokens: Prompt tokens (non-negative)
        output_tokens: Completion tokens (non-negative)

    Returns:
        CostBreakdown with input, output and total cost in USD.

    Raises:
        ValueError: If either token count is negative.
    """
    if input_tokens < 0 or output_tokens < 0:
        raise ValueError(
            f"Token counts must be non-negative, got input={input_tokens} "
            f"output={output_tokens}"
        )
    input_cost = input_tokens / TOKENS_PER_MILLION * model.input
    output_cost = output_tokens / TOKENS_PER_MILLION * model.output
    return CostBreakdown(
        input_cost=input_cost,
        output_cost=output_cost,
        total_cost=input_cost + output_cost,
    )


def monthly_cost(breakdown: CostBreakdown, requests: int) -> float:
    """Project a per-request cost over N monthly requests."""
    return breakdown.total_cost * requests


def estimate_tokens(text: str) -> int:
    """Rough token estimate for a prompt (~4 characters per token)."""
    return max(1, math.ceil(len(text) / 4))


def resolve_token_counts(
    input_tokens: int | None,
    output_tokens: int | None,
    prompt: str | None = None,
) -> tuple[int, int]:
    """Fill in missing token counts.

    Input falls back to a prompt estimate, then to DEFAULT_INPUT_TOKENS.
    Output falls back to twice the input, with a floor of
    MIN_DEFAULT_OUTPUT_TOKENS.
    """
    if not input_tokens and prompt:
        input_tokens = estimate_tokens(prompt)
    if not input_tokens:
        input_tokens = DEFAULT_INPUT_TOKENS
    if not output_tokens:
        output_tokens = max(MIN_DEFAULT_OUTPUT_TOKENS, input_tokens * 2)
    return input_tokens, output_tokens
