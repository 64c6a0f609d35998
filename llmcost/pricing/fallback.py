"""Hardcoded fallback table for when no live or cached pricing is available.

USD per million tokens. Sources: provider pricing pages as of 2025.
"""

from ..core.models import Model

FALLBACK_MODELS: tuple[Model, ...] = (
    # OpenAI
    Model(id="openai/gpt-4.1", provider="OpenAI", name="GPT-4.1",
          input=2.00, output=8.00, context=1047576, max_output=32768,
          vision=True, tools=True, structured_output=True),
    Model(id="openai/gpt-4.1-mini", provider="OpenAI", name="GPT-4.1 Mini",
          input=0.40, output=1.60, context=1047576, max_output=32768,
          vision=True, tools=True, structured_output=True),
    Model(id="openai/gpt-4.1-nano", provider="OpenAI", name="GPT-4.1 Nano",
          input=0.10, output=0.40, context=1047576, max_output=32768,
          vision=True, tools=True, structured_output=True),
    Model(id="openai/o3", provider="OpenAI", name="o3",
          input=10.00, output=40.00, context=200000, max_output=100000,
          vision=True, tools=True, reasoning=True, structured_output=True),
    Model(id="openai/o4-mini", provider="OpenAI", name="o4-mini",
          input=1.10, output=4.40, context=200000, max_output=100000,
          vision=True, tools=True, reasoning=True, structured_output=True),
    # Anthropic
    Model(id="anthropic/claude-sonnet-4.5", provider="Anthropic", name="Claude Sonnet 4.5",
          input=3.00, output=15.00, context=1000000, max_output=64000,
          vision=True, tools=True, reasoning=True, structured_output=True),
    Model(id="anthropic/claude-haiku-3.5", provider="Anthropic", name="Claude Haiku 3.5",
          input=0.80, output=4.00, context=200000, max_output=8192,
          vision=True, tools=True),
    # Google
    Model(id="google/gemini-2.5-pro", provider="Google", name="Gemini 2.5 Pro",
          input=1.25, output=10.00, context=1048576, max_output=65536,
          vision=True, tools=True, reasoning=True, structured_output=True),
    Model(id="google/gemini-2.5-flash", provider="Google", name="Gemini 2.5 Flash",
          input=0.15, output=0.60, context=1048576, max_output=65536,
          vision=True, tools=True, reasoning=True, structured_output=True),
    # DeepSeek
    Model(id="deepseek/deepseek-chat", provider="DeepSeek", name="DeepSeek V3",
          input=0.27, output=1.10, context=131072, max_output=8192,
          tools=True),
    Model(id="deepseek/deepseek-r1", provider="DeepSeek", name="DeepSeek R1",
          input=0.55, output=2.19, context=163840, max_output=8192,
          reasoning=True),
    # xAI
    Model(id="x-ai/grok-3", provider="xAI", name="Grok 3",
          input=3.00, output=15.00, context=131072, max_output=8192,
          tools=True),
    Model(id="x-ai/grok-3-mini", provider="xAI", name="Grok 3 Mini",
          input=0.30, output=0.50, context=131072, max_output=8192,
          tools=True, reasoning=True),
    # Mistral
    Model(id="mistralai/mistral-large", provider="Mistral", name="Mistral Large",
          input=2.00, output=6.00, context=128000, max_output=8192,
          tools=True, structured_output=True),
    Model(id="mistralai/mistral-small", provider="Mistral", name="Mistral Small",
          input=0.10, output=0.30, context=128000, max_output=8192,
          tools=True, structured_output=True),
)
