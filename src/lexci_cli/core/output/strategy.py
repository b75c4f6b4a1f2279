"""Default output strategy implementation."""

from __future__ import annotations

import shutil

import click

from lexci_cli.core.constants import Icons
from lexci_cli.core.output.verbosity import Verbosity


class OutputStrategy:
    """Verbosity-aware console output.

    | Level    | Flag      | User Sees                                |
    |----------|-----------|------------------------------------------|
    | NORMAL   | (default) | Commands, results, errors, warnings      |
    | VERBOSE  | -v        | + Phase and subproject details           |
    | DEBUG    | -vvv      | + Configuration resolution traces        |

    Parameters
    ----------
    verbosity : Verbosity
        Current verbosity level
    """

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL) -> None:
        self._verbosity = verbosity
        self._last_was_blank = False

    @property
    def verbosity(self) -> Verbosity:
        """Current verbosity level."""
        return self._verbosity

    def _emit(
        self,
        message: str,
        *,
        err: bool = False,
        style: dict | None = None,
    ) -> None:
        # Coalesce consecutive blank lines
        if not message or message.strip() == "":
            if self._last_was_blank:
                return
            click.echo("", err=err)
            self._last_was_blank = True
            return

        rendered = click.style(message, **style) if style else message
        click.echo(rendered, err=err)
        self._last_was_blank = False

    def error(self, message: str, to_stderr: bool = True) -> None:
        """Display error message (red). Always visible."""
        self._emit(f"{Icons.ERROR} {message}", err=to_stderr, style={"fg": "red"})

    def warning(self, message: str) -> None:
        """Display warning message (yellow). Always visible."""
        self._emit(message, style={"fg": "yellow"})

    def success(self, message: str) -> None:
        """Display success message (green). Always visible."""
        self._emit(message, style={"fg": "green"})

    def plain(self, message: str, err: bool = False) -> None:
        """Display plain message. Always visible."""
        self._emit(message, err=err)

    def command(self, argv: list[str], cwd: str | None = None) -> None:
        """Echo a command line before it runs, shell ``set -x`` style.

        Always visible; the echoed commands are the run's diagnostic trail.
        """
        line = "+ " + " ".join(argv)
        if cwd and self._verbosity >= Verbosity.VERBOSE:
            line += f"  ({cwd})"
        self._emit(line, style={"bold": True})

    def section(self, title: str, icon: str | None = None) -> None:
        """Display section heading with separator. Always visible."""
        width = self._get_separator_width()
        icon_prefix = f"{icon} " if icon else ""
        click.echo("-" * width)
        click.echo(f"{icon_prefix}{title}:")
        click.echo("-" * width)
        self._last_was_blank = False

    def subsection(self, title: str, icon: str | None = None) -> None:
        """Display subsection heading. Always visible."""
        icon_prefix = f"{icon} " if icon else ""
        click.echo(f"\n{icon_prefix}{title}:")
        self._last_was_blank = False

    def info(self, message: str) -> None:
        """Display info message. Visible at VERBOSE+."""
        if self._verbosity >= Verbosity.VERBOSE:
            self._emit(message)

    def debug(self, message: str) -> None:
        """Display debug message (cyan). Visible at DEBUG only."""
        if self._verbosity >= Verbosity.DEBUG:
            self._emit(f"[DEBUG] {message}", style={"fg": "cyan"})

    def _get_separator_width(self) -> int:
        try:
            terminal_size = shutil.get_terminal_size()
            return max(40, min(terminal_size.columns - 2, 100))
        except Exception:
            return 60

    @classmethod
    def from_click_context(cls, ctx: click.Context) -> OutputStrategy:
        """Create OutputStrategy from the verbosity flags on a Click context."""
        obj = ctx.obj
        verbose = getattr(obj, "verbose", False) if obj else False
        verbose_debug = getattr(obj, "verbose_debug", False) if obj else False
        return cls(verbosity=Verbosity.from_flags(verbose, verbose_debug))
