"""Core CLI app definition: the `llm-cost` command."""

import json
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..config import get_config
from ..core.cost import resolve_token_counts
from ..pricing import CacheStore, resolve_models
from ..query import (
    SORT_KEYS,
    ModelFilter,
    best_for,
    filter_models,
    find_model,
    limit_results,
    parse_list,
    price_models,
    sort_results,
)
from .display import (
    print_best_for,
    print_cache_info,
    print_callout,
    print_cost_table,
    print_header,
    print_model_detail,
    print_model_list,
)
from .utils import ExitCode, build_json_payload

app = typer.Typer(
    name="llm-cost",
    help="Compare LLM API costs across providers (live pricing).",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        print(f"llm-cost v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route llmcost logs to stderr through rich."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    logging.getLogger("llmcost").setLevel(level)


def _no_match(message: str) -> typer.Exit:
    err_console.print(f"\n  [red]{message}[/red]\n", highlight=False)
    return typer.Exit(ExitCode.NO_MATCH)


@app.command()
def compare(
    prompt: str | None = typer.Argument(
        None, help="Prompt text; input tokens are estimated from it"
    ),
    tokens: int | None = typer.Option(
        None, "--tokens", "-t", min=0, help="Input token count (or auto-estimate from prompt)"
    ),
    output_tokens: int | None = typer.Option(
        None, "--output-tokens", "-o", min=0, help="Expected output tokens (default: 2x input)"
    ),
    models: str | None = typer.Option(
        None, "--models", "-m", help="Filter to specific models (comma-separated)"
    ),
    providers: str | None = typer.Option(
        None, "--providers", "-p", help="Filter by provider (openai,anthropic,google,...)"
    ),
    monthly: int | None = typer.Option(
        None, "--monthly", min=0, help="Show monthly cost for N requests"
    ),
    cheap: bool = typer.Option(False, "--cheap", help="Show only the 5 cheapest models"),
    top: int | None = typer.Option(None, "--top", min=1, help="Show top N models"),
    sort: str = typer.Option(
        "cost", "--sort", "-s", help=f"Sort by: {', '.join(SORT_KEYS)}"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    list_all: bool = typer.Option(False, "--list", "-l", help="List all models and pricing"),
    refresh: bool = typer.Option(
        False, "--refresh", "-r", help="Force refresh pricing data (bypass cache)"
    ),
    detail: str | None = typer.Option(
        None, "--detail", "-d", help="Show full details for a model (pricing, caps, cache)"
    ),
    vision: bool = typer.Option(False, "--vision", help="Only models that accept images"),
    tools: bool = typer.Option(False, "--tools", help="Only models with function/tool calling"),
    reasoning: bool = typer.Option(
        False, "--reasoning", help="Only models with reasoning/chain-of-thought"
    ),
    audio: bool = typer.Option(False, "--audio", help="Only models that accept audio"),
    structured: bool = typer.Option(
        False, "--structured", help="Only models with structured JSON output"
    ),
    min_context: int | None = typer.Option(
        None, "--context", min=0, help="Only models with ≥N context window (e.g. 128000)"
    ),
    caps: bool = typer.Option(False, "--caps", help="Show capabilities column in table"),
    best: bool = typer.Option(
        False, "--best-for", "--best", help="Show cheapest model for each use case"
    ),
    cache_info: bool = typer.Option(False, "--cache-info", help="Show pricing cache status"),
    clear_cache: bool = typer.Option(False, "--clear-cache", help="Delete the pricing cache"),
    verbose: bool = typer.Option(False, "--verbose", help="Log pricing resolution steps"),
    debug: bool = typer.Option(False, "--debug", help="Debug-level logging"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Compare LLM API costs across providers.

    Pricing comes live from the OpenRouter API, cached locally for 6 hours.
    Prices are per 1M tokens in USD.

    Example:
        llm-cost "Explain quantum computing"
        llm-cost --tokens 1000 -o 4000 --monthly 50000 -p openai,anthropic
        llm-cost --vision --cheap
        llm-cost --detail claude-sonnet-4.5
        llm-cost --context 1000000 --sort context
    """
    setup_logging(verbose=verbose, debug=debug)
    config = get_config()

    if cache_info or clear_cache:
        store = CacheStore(config.cache_file, ttl_seconds=config.cache_ttl_seconds)
        if clear_cache:
            if store.clear():
                console.print(f"[green]✓[/green] Removed {store.path}", highlight=False)
            else:
                console.print("Cache already empty (no cache file exists)")
        if cache_info:
            print_cache_info(console, store.info())
        return

    resolved = resolve_models(force_refresh=refresh, config=config)
    all_models = resolved.models
    source_label = resolved.source.label
    provider_terms = parse_list(providers)

    if list_all:
        listed = filter_models(all_models, ModelFilter(providers=provider_terms))
        if not listed:
            raise _no_match("No models matched your filter. Use --list to see all models.")
        print_model_list(console, listed, source_label)
        return

    if best:
        print_best_for(console, best_for(all_models))
        return

    if detail:
        match = find_model(all_models, detail)
        if match is None:
            raise _no_match(f'No models matched "{detail}". Use --list to see all.')
        print_model_detail(console, match)
        return

    input_tokens, out_tokens = resolve_token_counts(tokens, output_tokens, prompt)

    flt = ModelFilter(
        models=parse_list(models),
        providers=provider_terms,
        vision=vision,
        audio=audio,
        tools=tools,
        reasoning=reasoning,
        structured_output=structured,
        min_context=min_context,
    )
    matched = filter_models(all_models, flt)
    if not matched:
        raise _no_match("No models matched your filter. Use --list to see all models.")

    results = sort_results(price_models(matched, input_tokens, out_tokens, monthly), sort)
    display = limit_results(results, top=top, cheap=cheap)

    if json_output:
        payload = build_json_payload(
            display,
            input_tokens=input_tokens,
            output_tokens=out_tokens,
            source=resolved.source,
            monthly_requests=monthly,
        )
        print(json.dumps(payload, indent=2))
        return

    print_header(
        console,
        input_tokens=input_tokens,
        output_tokens=out_tokens,
        monthly_requests=monthly,
        source_label=source_label,
        count=len(display),
    )
    print_cost_table(console, display, monthly=bool(monthly), show_caps=caps)
    print_callout(console, results, monthly=bool(monthly))


def main() -> None:
    app()
