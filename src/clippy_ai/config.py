"""Configuration loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

USER_AGENT = "Mozilla/5.0 (compatible; clippy.ai/1.0)"
CONTENT_PLACEHOLDER = "{content}"
DEFAULT_MODEL = "models/gemini-2.0-flash"
DEFAULT_PROMPT_TEMPLATE = (
    "Summarize the following web page in a few short paragraphs. "
    "Focus on what the page is about and why someone might have bookmarked it.\n\n"
    f"{CONTENT_PLACEHOLDER}"
)


def default_settings_path() -> Path:
    return Path.home() / ".config" / "clippy.ai" / "settings.json"


@dataclass
class Config:
    """Application configuration."""

    gemini_api_key: str = ""
    model: str = ""
    prompt_template: str = DEFAULT_PROMPT_TEMPLATE
    settings_path: Path = field(default_factory=default_settings_path)
    title_timeout: float = 10.0
    summary_timeout: float = 15.0
    verbose: bool = False

    @property
    def default_model(self) -> str:
        return self.model or DEFAULT_MODEL

    def validate(self) -> None:
        """Validate configuration values."""
        if self.title_timeout <= 0 or self.summary_timeout <= 0:
            raise ConfigError("Timeouts must be positive.")
        if not self.prompt_template.strip():
            raise ConfigError("Prompt template cannot be empty.")

    def require_api_key(self) -> str:
        """Return the Gemini API key, or fail if none is configured."""
        if not self.gemini_api_key:
            raise ConfigError(
                "GEMINI_API_KEY is required. Set it in .env or environment."
            )
        return self.gemini_api_key


def load_config(
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    prompt_template: Optional[str] = None,
    settings_path: Optional[str] = None,
    verbose: bool = False,
) -> Config:
    """Load config from .env and apply CLI overrides."""
    load_dotenv()

    settings_file = settings_path or os.getenv("CLIPPY_SETTINGS_PATH")
    config = Config(
        gemini_api_key=api_key or os.getenv("GEMINI_API_KEY", ""),
        model=model or os.getenv("GEMINI_MODEL", ""),
        prompt_template=(
            prompt_template
            or os.getenv("CLIPPY_PROMPT_TEMPLATE")
            or DEFAULT_PROMPT_TEMPLATE
        ),
        settings_path=Path(settings_file) if settings_file else default_settings_path(),
        verbose=verbose,
    )

    config.validate()
    return config
