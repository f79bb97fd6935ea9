"""Data models for clippy-ai."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CommandResult:
    """Outcome of running an external command.

    ``output`` is raw stdout on success, the trimmed stdout+stderr on a
    nonzero exit, or the spawn error text when the process never started.
    """

    success: bool
    output: str
    spawn_failed: bool = False

    @classmethod
    def ok(cls, stdout: str) -> "CommandResult":
        return cls(success=True, output=stdout)

    @classmethod
    def failed(cls, stdout: str, stderr: str) -> "CommandResult":
        return cls(success=False, output=f"{stdout}{stderr}".strip())

    @classmethod
    def spawn_error(cls, message: str) -> "CommandResult":
        return cls(success=False, output=message, spawn_failed=True)


@dataclass
class SummaryRequest:
    """Everything needed to summarize one page."""

    url: str
    api_key: str
    model: str
    prompt_template: str


@dataclass
class Settings:
    """Persisted user settings (``settings.json``)."""

    last_opened_file: Optional[str] = None


class InitialFile:
    """Workspace path captured at startup, handed out at most once."""

    def __init__(self, path: Optional[str] = None):
        self._path = path

    def take(self) -> Optional[str]:
        path, self._path = self._path, None
        return path
