"""Command executor service.

Every subprocess the orchestrator launches goes through :class:`CommandExecutor`,
which echoes the command line, runs it in an explicit working directory and turns
non-zero exits into :class:`~lexci_common.errors.CommandFailedError`.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from lexci_cli.core.constants import ExitCode
from lexci_common.errors import CommandFailedError
from lexci_logging import get_cli_logger

if TYPE_CHECKING:
    from lexci_cli.core.output import OutputStrategy

logger = get_cli_logger(__name__)


@dataclass(frozen=True)
class ExecutedCommand:
    """Record of one command handed to the executor."""

    argv: tuple[str, ...]
    cwd: Path | None
    returncode: int


class CommandExecutor:
    """Centralized, blocking subprocess execution.

    Output of the child process is passed through to the terminal. There is no
    timeout: the CI provider bounds the wall clock of the whole run.

    Parameters
    ----------
    output : OutputStrategy | None
        When given, each command is echoed before it runs
    dry_run : bool
        Record and echo commands without executing them

    Examples
    --------
    >>> executor = CommandExecutor()
    >>> executor.execute(["cargo", "build"], cwd=Path("lexical-core"))
    """

    def __init__(
        self,
        output: OutputStrategy | None = None,
        dry_run: bool = False,
    ) -> None:
        self._output = output
        self.dry_run = dry_run
        self.history: list[ExecutedCommand] = []

    def execute(
        self,
        cmd: list[str],
        cwd: Path | None = None,
    ) -> subprocess.CompletedProcess[str]:
        """Execute a command and wait for it to finish.

        Parameters
        ----------
        cmd : list[str]
            Command to execute
        cwd : Path, optional
            Working directory

        Returns
        -------
        subprocess.CompletedProcess[str]
            Result of command execution

        Raises
        ------
        CommandFailedError
            If the command exits non-zero or cannot be found
        """
        if self._output is not None:
            self._output.command(cmd, str(cwd) if cwd else None)
        logger.debug(
            "Executing: %s (cwd=%s, dry_run=%s)",
            " ".join(cmd),
            cwd,
            self.dry_run,
        )

        if self.dry_run:
            self._record(cmd, cwd, ExitCode.SUCCESS)
            return subprocess.CompletedProcess(cmd, ExitCode.SUCCESS, "", "")

        result = self._run_subprocess(cmd, cwd)
        self._record(cmd, cwd, result.returncode)

        if result.returncode != 0:
            logger.debug(
                "Command failed (exit %s): %s",
                result.returncode,
                " ".join(cmd),
            )
            raise CommandFailedError(
                cmd,
                result.returncode,
                str(cwd) if cwd else None,
            )

        return result

    def _run_subprocess(
        self,
        cmd: list[str],
        cwd: Path | None,
    ) -> subprocess.CompletedProcess[str]:
        """Run subprocess, mapping a missing executable to exit 127."""
        try:
            return subprocess.run(  # noqa: S603
                cmd,
                cwd=cwd,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            logger.error("Cannot run %s: %s", cmd[0], e)
            return subprocess.CompletedProcess(cmd, ExitCode.NOT_FOUND, "", str(e))

    def _record(self, cmd: list[str], cwd: Path | None, returncode: int) -> None:
        self.history.append(ExecutedCommand(tuple(cmd), cwd, returncode))


__all__ = [
    "CommandExecutor",
    "ExecutedCommand",
]
