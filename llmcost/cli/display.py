"""Rich renderers for the human-mode CLI output."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.models import Model
from ..query import CostedModel, Recommendation, cost_ratio
from .utils import caps_badge, caps_letters, format_context, format_tokens, format_usd

_RULE = "─" * 50


def print_header(
    console: Console,
    *,
    input_tokens: int,
    output_tokens: int,
    monthly_requests: int | None,
    source_label: str,
    count: int,
) -> None:
    line = (
        f"Input: {format_tokens(input_tokens)} tokens | "
        f"Output: {format_tokens(output_tokens)} tokens"
    )
    if monthly_requests:
        line += f" | {format_tokens(monthly_requests)} requests/mo"
    console.print()
    console.print(f"  {line}", highlight=False)
    console.print(f"  Pricing: {source_label} | {count} models", highlight=False)


def print_cost_table(
    console: Console,
    rows: Sequence[CostedModel],
    *,
    monthly: bool = False,
    show_caps: bool = False,
) -> None:
    """Comparison table: one row per priced model."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Model")
    table.add_column("Provider")
    table.add_column("Input/1M", justify="right")
    table.add_column("Output/1M", justify="right")
    table.add_column("Context", justify="right")
    table.add_column("Est. Cost", justify="right", style="green")
    if monthly:
        table.add_column("Monthly", justify="right")
    if show_caps:
        table.add_column("Capabilities", style="dim")

    for row in rows:
        m = row.model
        cells = [
            escape(m.name),
            escape(m.provider),
            format_usd(m.input),
            format_usd(m.output),
            format_context(m.context),
            format_usd(row.total_cost),
        ]
        if monthly:
            cells.append(format_usd(row.monthly_cost or 0.0))
        if show_caps:
            cells.append(caps_badge(m))
        table.add_row(*cells)

    console.print()
    console.print(table)


def print_callout(console: Console, rows: Sequence[CostedModel], *, monthly: bool = False) -> None:
    """Cheapest-vs-priciest summary under the table."""
    if len(rows) < 2:
        return
    cheapest = min(rows, key=lambda r: r.total_cost)
    priciest = max(rows, key=lambda r: r.total_cost)
    ratio = cost_ratio(cheapest, priciest)
    ratio_text = "∞" if ratio == float("inf") else f"{ratio:.0f}"
    console.print(
        f"  Cheapest: [bold]{escape(cheapest.model.name)}[/bold] "
        f"({format_usd(cheapest.total_cost)}) — "
        f"{ratio_text}x less than {escape(priciest.model.name)}",
        highlight=False,
    )
    if monthly:
        savings = (priciest.monthly_cost or 0.0) - (cheapest.monthly_cost or 0.0)
        console.print(
            f"  Monthly: {escape(cheapest.model.name)} saves {format_usd(savings)}/mo "
            f"vs {escape(priciest.model.name)}",
            highlight=False,
        )
    console.print()


def print_model_list(console: Console, models: Sequence[Model], source_label: str) -> None:
    """All models grouped by provider, in resolved order."""
    console.print()
    console.print(
        f"  [bold]{len(models)} models[/bold] — pricing per 1M tokens (USD) [dim]\\[{source_label}][/dim]",
        highlight=False,
    )
    console.print()

    by_provider: dict[str, list[Model]] = {}
    for m in models:
        by_provider.setdefault(m.provider, []).append(m)

    for provider, provider_models in by_provider.items():
        console.print(f"  [bold cyan]{escape(provider)}[/bold cyan] ({len(provider_models)})")
        for m in provider_models:
            letters = caps_letters(m)
            caps = f" \\[{letters}]" if letters else ""
            name = escape(m.name.ljust(36))
            console.print(
                f"    {name} {format_usd(m.input):>10} in  "
                f"{format_usd(m.output):>10} out  {format_context(m.context):>6}{caps}",
                highlight=False,
            )
        console.print()

    console.print("  \\[V]ision  \\[A]udio  \\[R]easoning  \\[T]ools")
    console.print()


def _yes_no(flag: bool) -> str:
    return "[green]yes[/green]" if flag else "[dim]no[/dim]"


def print_model_detail(console: Console, model: Model) -> None:
    """Full pricing and capability breakdown for one model."""
    console.print()
    console.print(f"  [bold]{escape(model.name)}[/bold] ({escape(model.provider)})", highlight=False)
    console.print(f"  {_RULE}")
    console.print(f"  ID:              {escape(model.id)}", highlight=False)
    console.print(f"  Input:           {format_usd(model.input)} / 1M tokens")
    console.print(f"  Output:          {format_usd(model.output)} / 1M tokens")
    if model.cache_read:
        console.print(f"  Cache read:      {format_usd(model.cache_read)} / 1M tokens")
    if model.cache_write:
        console.print(f"  Cache write:     {format_usd(model.cache_write)} / 1M tokens")
    if model.thinking_cost:
        console.print(f"  Thinking/CoT:    {format_usd(model.thinking_cost)} / 1M tokens")
    console.print(f"  Context window:  {format_context(model.context)} tokens")
    if model.max_output:
        console.print(f"  Max output:      {format_context(model.max_output)} tokens")

    console.print()
    console.print("  [bold]Capabilities[/bold]")
    console.print(f"  {_RULE}")
    console.print(f"  Vision:          {_yes_no(model.vision)}")
    console.print(f"  Audio input:     {_yes_no(model.audio)}")
    console.print(f"  Video input:     {_yes_no(model.video)}")
    console.print(f"  Image output:    {_yes_no(model.image_out)}")
    console.print(f"  Tool calling:    {_yes_no(model.tools)}")
    console.print(f"  Reasoning/CoT:   {_yes_no(model.reasoning)}")
    console.print(f"  Structured JSON: {_yes_no(model.structured_output)}")

    if model.cache_read and model.input:
        savings = (1 - model.cache_read / model.input) * 100
        console.print()
        console.print("  [bold]Cache Savings[/bold]")
        console.print(f"  {_RULE}")
        console.print(f"  Cache read is {savings:.0f}% cheaper than regular input")
        console.print("  Use prompt caching for repeated system prompts / context")

    if model.description:
        ellipsis = "..." if len(model.description) >= 200 else ""
        console.print()
        console.print(f"  {model.description}{ellipsis}", markup=False, highlight=False)
    console.print()


def print_best_for(console: Console, recommendations: Sequence[Recommendation]) -> None:
    """One line per use case: label, winning model, and why."""
    console.print()
    console.print("  [bold]Best model for each use case[/bold] (cheapest that qualifies)")
    console.print(f"  {'─' * 55}")

    for rec in recommendations:
        label = f"{rec.use_case.label:<28}"
        m = rec.model
        if m is None:
            console.print(f"  {label} [dim]—[/dim]")
            continue
        if rec.use_case.rank_by == "context":
            detail = format_context(m.context)
        elif rec.use_case.rank_by == "max_output":
            detail = format_context(m.max_output)
        else:
            detail = f"{format_usd(m.input)} in / {format_usd(m.output)} out"
        console.print(f"  {label} {m.name:<28} {detail}", highlight=False, markup=False)
    console.print()


def print_cache_info(console: Console, info: dict) -> None:
    console.print()
    console.print("[bold]Model Cache[/bold]")
    console.print("─" * 40)
    console.print(f"  file    = {info['cache_file']}", highlight=False)
    if not info["cache_exists"]:
        console.print("  status  = [dim]not created yet[/dim]")
    elif info.get("cache_corrupt"):
        console.print("  status  = [red]unreadable[/red] (will be refetched)")
    else:
        status = "[green]fresh[/green]" if info["cache_fresh"] else "[yellow]stale[/yellow]"
        console.print(f"  status  = {status}")
        console.print(f"  age     = {info['cache_age_hours']}h (ttl {info['ttl_hours']}h)")
        console.print(f"  models  = {info['cached_models']}")
    console.print()
