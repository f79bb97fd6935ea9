"""Git backup (commit + push) and refresh (pull) of the workspace file."""

import logging
import os
from typing import Callable, Optional, Sequence, Type

from .exceptions import (
    CommitFailed,
    InvalidPath,
    NotARepository,
    NothingToCommit,
    PullFailed,
    PushFailed,
    SpawnFailed,
    StageFailed,
    SyncError,
)
from .runner import CommandRunner, SubprocessRunner
from .timefmt import utc_now

logger = logging.getLogger(__name__)


def workspace_dir(workspace_path: str) -> str:
    """Return the directory containing the workspace file.

    Raises InvalidPath when the path has no parent (empty, bare filename,
    or a filesystem root).
    """
    parent = os.path.dirname(workspace_path)
    if not parent or os.path.normpath(parent) == os.path.normpath(workspace_path):
        raise InvalidPath("Invalid workspace file path", step="resolve")
    return parent


def _git(
    runner: CommandRunner,
    args: Sequence[str],
    cwd: str,
    error_cls: Type[SyncError],
    message: str,
) -> str:
    """Run one git step, raising ``error_cls`` with ``message`` on failure."""
    step = f"git {args[0]}"
    logger.debug("%s: %s", step, " ".join(args))
    result = runner.run(args, cwd)
    if result.spawn_failed:
        raise SpawnFailed(f"{message}\n{result.output}", step=step, output=result.output)
    if not result.success:
        raise error_cls(f"{message}\n{result.output}", step=step, output=result.output)
    return result.output


def backup(
    workspace_path: str,
    runner: Optional[CommandRunner] = None,
    clock: Optional[Callable[[], float]] = None,
) -> str:
    """Stage the workspace file, commit it with a timestamped message, and push.

    Args:
        workspace_path: Path of the bookmarks file inside a git working tree.
        runner: Command runner for git (default: real subprocess).
        clock: Time source for timestamps (default: ``time.time``).

    Returns a confirmation message with the completion time.

    Raises NothingToCommit when the working tree is clean; every other
    failure raises the SyncError subclass for the step that failed.
    """
    runner = runner or SubprocessRunner("git")
    cwd = workspace_dir(workspace_path)

    status = _git(
        runner, ["status", "--porcelain"], cwd, NotARepository,
        "git status failed: is this a git repository?",
    )
    if not status.strip():
        logger.info("No pending changes in %s", cwd)
        raise NothingToCommit("No changes to commit.", step="git status")

    # Absolute so git resolves it against the repo, not the caller's cwd
    target = os.path.abspath(workspace_path)
    _git(runner, ["add", target], cwd, StageFailed, "git add failed:")

    commit_msg = f"Backup bookmarks {utc_now(clock)}"
    _git(runner, ["commit", "-m", commit_msg], cwd, CommitFailed, "git commit failed:")

    _git(runner, ["push"], cwd, PushFailed, "git push failed:")

    message = f"Bookmarks backed up successfully ({utc_now(clock)})"
    logger.info(message)
    return message


def refresh(workspace_path: str, runner: Optional[CommandRunner] = None) -> str:
    """Fast-forward pull the repository containing the workspace file.

    Returns git's trimmed pull output. Divergent history surfaces as
    PullFailed; it is never merged here.
    """
    runner = runner or SubprocessRunner("git")
    cwd = workspace_dir(workspace_path)

    _git(runner, ["status"], cwd, NotARepository, "Not a git repository:")
    out = _git(runner, ["pull", "--ff"], cwd, PullFailed, "git pull failed:")

    out = out.strip()
    logger.info("Pulled %s: %s", cwd, out or "(no output)")
    return out
