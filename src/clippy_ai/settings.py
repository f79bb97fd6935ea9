"""Persisted user settings (last opened workspace file)."""

import json
import logging
from pathlib import Path
from typing import Optional

from .config import default_settings_path
from .models import Settings

logger = logging.getLogger(__name__)


def settings_path(path: Optional[Path] = None) -> Path:
    """Return the settings file path, creating its directory if needed."""
    path = path or default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    path = settings_path(path)
    data = {}
    if settings.last_opened_file is not None:
        data["lastOpenedFile"] = settings.last_opened_file
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings, writing defaults when the file is missing or unreadable."""
    path = settings_path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("Settings at %s unusable (%s); writing defaults", path, e)
        settings = Settings()
        save_settings(settings, path)
        return settings

    last = data.get("lastOpenedFile") if isinstance(data, dict) else None
    return Settings(last_opened_file=last if isinstance(last, str) else None)


def remember_workspace(workspace_path: str, path: Optional[Path] = None) -> None:
    """Record ``workspace_path`` as the last opened file."""
    settings = load_settings(path)
    if settings.last_opened_file == workspace_path:
        return
    settings.last_opened_file = workspace_path
    save_settings(settings, path)
