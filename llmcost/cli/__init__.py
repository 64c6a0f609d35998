"""CLI for llm-cost."""

from .app import app, main

__all__ = ["app", "main"]
