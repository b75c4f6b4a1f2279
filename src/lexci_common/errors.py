"""Exception hierarchy for lexical-ci."""

from __future__ import annotations


def shell_exit_code(returncode: int) -> int:
    """Map a subprocess return code to the status a shell would report.

    A negative code means the child was killed by that signal; shells report
    ``128 + signal`` for it.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


class LexciError(Exception):
    """Base class for all lexical-ci errors."""

    exit_code: int = 1


class CommandFailedError(LexciError):
    """A subprocess exited with a non-zero status.

    ``returncode`` is the raw subprocess status. ``exit_code`` is what the CLI
    exits with: the same status, or ``128 + signal`` for a killed child.

    Parameters
    ----------
    cmd : list[str]
        The command line that failed
    returncode : int
        Exit status reported by the subprocess
    cwd : str | None
        Working directory the command ran in
    """

    def __init__(
        self,
        cmd: list[str],
        returncode: int,
        cwd: str | None = None,
    ) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.cwd = cwd
        self.exit_code = shell_exit_code(returncode)
        msg = f"Command failed (exit {self.exit_code}): {' '.join(self.cmd)}"
        if returncode < 0:
            msg += f" (killed by signal {-returncode})"
        if cwd:
            msg += f" [in {cwd}]"
        super().__init__(msg)
