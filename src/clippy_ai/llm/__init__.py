"""LLM provider factory."""

from typing import Optional

from ..config import Config
from .base import LLMProvider
from .gemini import GeminiProvider


def get_llm_provider(config: Config, model: Optional[str] = None) -> LLMProvider:
    """Create and return the configured LLM provider."""
    return GeminiProvider(
        api_key=config.require_api_key(),
        model=model or config.default_model,
        generate_timeout=config.summary_timeout,
        list_timeout=config.title_timeout,
    )
