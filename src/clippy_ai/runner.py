"""External command execution."""

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Sequence

from .models import CommandResult

logger = logging.getLogger(__name__)


class CommandRunner(ABC):
    """Runs one external program in a working directory."""

    @abstractmethod
    def run(self, args: Sequence[str], cwd: str) -> CommandResult:
        """Run the program with ``args`` inside ``cwd``.

        Args:
            args: Arguments after the program name.
            cwd: Working directory for the child process.

        Returns a :class:`CommandResult`; never raises for a failed command.
        """


class SubprocessRunner(CommandRunner):
    """Runs a real program via :mod:`subprocess`.

    Waits for the child without a timeout, so a hung program blocks the
    caller indefinitely.
    """

    def __init__(self, program: str = "git"):
        self._program = program

    def run(self, args: Sequence[str], cwd: str) -> CommandResult:
        cmd = [self._program, *args]
        logger.debug("Running %s in %s", cmd, cwd)
        try:
            proc = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.debug("Could not start %s: %s", self._program, e)
            return CommandResult.spawn_error(f"Failed to run {self._program}: {e}")

        if proc.returncode == 0:
            return CommandResult.ok(proc.stdout)
        logger.debug("%s exited with %d", cmd, proc.returncode)
        return CommandResult.failed(proc.stdout, proc.stderr)


def run_command(program: str, args: Sequence[str], cwd: str) -> CommandResult:
    """Run ``program`` once with ``args`` in ``cwd``."""
    return SubprocessRunner(program).run(args, cwd)
