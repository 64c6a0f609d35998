"""Vendor slug to provider display name lookup."""

from types import MappingProxyType

# Vendor slug (first segment of an OpenRouter model id) → display name
PROVIDER_NAMES = MappingProxyType(
    {
        "openai": "OpenAI",
        "anthropic": "Anthropic",
        "google": "Google",
        "deepseek": "DeepSeek",
        "meta-llama": "Meta",
        "x-ai": "xAI",
        "mistralai": "Mistral",
        "cohere": "Cohere",
        "qwen": "Qwen",
        "amazon": "Amazon",
        "nvidia": "NVIDIA",
        "microsoft": "Microsoft",
        "perplexity": "Perplexity",
        "ai21": "AI21",
        "together": "Together",
        "fireworks": "Fireworks",
        "groq": "Groq",
    }
)


def vendor_slug(model_id: str) -> str:
    """Return the vendor part of a "vendor/model" id."""
    return model_id.split("/", 1)[0]


def provider_for(model_id: str) -> str:
    """Map a model id to its provider display name.

    Unmapped vendors fall back to the raw slug.

    Examples:
        "x-ai/grok-3" → "xAI"
        "liquid/lfm-40b" → "liquid"
    """
    slug = vendor_slug(model_id)
    return PROVIDER_NAMES.get(slug, slug)


def clean_name(name: str, provider: str) -> str:
    """Strip a redundant "<provider>: " prefix from a display name."""
    prefix = f"{provider}: "
    if name.startswith(prefix):
        return name[len(prefix) :]
    return name
