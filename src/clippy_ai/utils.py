"""Utility functions for clippy-ai."""

from urllib.parse import urlparse


def extract_host(url: str) -> str:
    """Extract the host from a URL, or "" if it has none."""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def normalize_model_name(model: str) -> str:
    """Gemini model ids live under ``models/``; add the prefix if missing."""
    model = model.strip()
    if not model or model.startswith(("models/", "tunedModels/")):
        return model
    return f"models/{model}"


def preview(text: str, max_length: int = 200) -> str:
    """Shorten text for log lines."""
    text = " ".join(text.split())
    if len(text) > max_length:
        return text[:max_length].rstrip() + "..."
    return text
