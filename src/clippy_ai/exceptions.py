"""Custom exceptions for clippy-ai."""

from typing import Optional


class ClippyError(Exception):
    """Base exception for clippy-ai."""


class ConfigError(ClippyError):
    """Raised when configuration is missing or invalid."""


class SyncError(ClippyError):
    """Raised when a git backup/refresh step fails.

    ``step`` names the failing step (e.g. ``"git push"``) and ``output`` holds
    the tool's trimmed combined stdout/stderr, when there is any.
    """

    def __init__(self, message: str, step: str = "", output: str = ""):
        super().__init__(message)
        self.step = step
        self.output = output


class InvalidPath(SyncError):
    """Raised when the workspace path has no parent directory."""


class NotARepository(SyncError):
    """Raised when the repository check (git status) fails."""


class NothingToCommit(SyncError):
    """Raised when there are no pending changes. A no-op signal, not a failure."""


class StageFailed(SyncError):
    """Raised when git add fails."""


class CommitFailed(SyncError):
    """Raised when git commit fails."""


class PushFailed(SyncError):
    """Raised when git push fails."""


class PullFailed(SyncError):
    """Raised when git pull --ff fails."""


class SpawnFailed(SyncError):
    """Raised when the git binary is missing or cannot be executed."""


class WebError(ClippyError):
    """Raised when fetching a page or calling the Gemini API fails."""


class NetworkError(WebError):
    """Raised on timeouts, connection errors and TLS failures."""


class HttpStatusError(WebError):
    """Raised on a non-success HTTP response."""

    def __init__(self, message: str, status_code: int, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class MalformedResponse(WebError):
    """Raised when an expected JSON field is missing from a response."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw
