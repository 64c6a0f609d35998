"""Configuration management for llm-cost.

Config resolution order (highest priority first):
1. Programmatic (LLMCostConfig constructed in code)
2. Environment variables (LLM_COST_CACHE_DIR, LLM_COST_CACHE_TTL_HOURS, etc.)
3. Config file (~/.config/llm-cost/config.json)
4. Hardcoded defaults

The tool never writes the config file; it is optional and hand-edited.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


# =============================================================================
# Locations and defaults
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "llm-cost"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_CACHE_DIR = Path.home() / ".llm-cost"
CACHE_FILENAME = "models.json"
DEFAULT_CACHE_TTL_HOURS = 6.0
DEFAULT_FETCH_TIMEOUT = 8.0
DEFAULT_SOURCE_URL = "https://openrouter.ai/api/v1/models"


@dataclass
class LLMCostConfig:
    """Top-level llm-cost configuration.

    Examples:
        # Tests / package use: point the cache somewhere else
        config = LLMCostConfig(cache_dir=tmp_path)

        # CLI use: file + env layering
        config = LLMCostConfig.load()
    """

    cache_dir: Path = field(default_factory=lambda: DEFAULT_CACHE_DIR)
    cache_ttl_hours: float = DEFAULT_CACHE_TTL_HOURS
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    source_url: str = DEFAULT_SOURCE_URL

    @property
    def cache_file(self) -> Path:
        return Path(self.cache_dir) / CACHE_FILENAME

    @property
    def cache_ttl_seconds(self) -> float:
        return self.cache_ttl_hours * 60 * 60

    @classmethod
    def load(cls, config_file: Path | None = None) -> "LLMCostConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()
        path = config_file or CONFIG_FILE

        # Layer 1: config file
        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    _apply_dict(config, data)
                else:
                    logger.warning("Ignoring config file %s: not a JSON object", path)
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to load config from %s: %s", path, exc)

        # Layer 2: env var overrides
        if val := os.environ.get("LLM_COST_CACHE_DIR"):
            config.cache_dir = Path(val).expanduser()
        if val := os.environ.get("LLM_COST_CACHE_TTL_HOURS"):
            try:
                config.cache_ttl_hours = float(val)
            except ValueError:
                logger.warning("Invalid LLM_COST_CACHE_TTL_HOURS=%r, ignoring", val)
        if val := os.environ.get("LLM_COST_FETCH_TIMEOUT"):
            try:
                config.fetch_timeout = float(val)
            except ValueError:
                logger.warning("Invalid LLM_COST_FETCH_TIMEOUT=%r, ignoring", val)
        if val := os.environ.get("LLM_COST_SOURCE_URL"):
            config.source_url = val

        return config


def _apply_dict(config: LLMCostConfig, data: dict) -> None:
    """Apply config-file values onto a LLMCostConfig."""
    if "cache_dir" in data:
        config.cache_dir = Path(str(data["cache_dir"])).expanduser()
    for key in ("cache_ttl_hours", "fetch_timeout"):
        if key in data:
            try:
                setattr(config, key, float(data[key]))
            except (TypeError, ValueError):
                logger.warning("Invalid %s=%r in config file, ignoring", key, data[key])
    if "source_url" in data and isinstance(data["source_url"], str):
        config.source_url = data["source_url"]


# =============================================================================
# Process-wide singleton
# =============================================================================

_config: LLMCostConfig | None = None


def get_config() -> LLMCostConfig:
    """Get the process config, loading it on first use."""
    global _config
    if _config is None:
        _config = LLMCostConfig.load()
    return _config


def reset_config() -> None:
    """Clear the cached config so the next get_config() reloads."""
    global _config
    _config = None
