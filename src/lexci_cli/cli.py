"""Main CLI entry point for lexical-ci.

This module provides the main Click command group and wires the ``run``,
``config`` and ``matrix`` subcommands onto it.
"""

import os
import sys
from pathlib import Path

import click

from lexci_cli.commands import config, matrix, run
from lexci_cli.core.constants import ALL_LOG_LEVELS, EnvVars, Icons, LogLevel
from lexci_cli.core.output import OutputStrategy, Verbosity
from lexci_cli.core.project_config import (
    ProjectSettings,
    get_project_config_path,
    load_project_settings,
)
from lexci_common.env import reader
from lexci_common.repo import detect_repo_root
from lexci_logging import configure_logger, get_cli_logger

logger = get_cli_logger(__name__)

LOGGING_PACKAGES = ("lexci_cli", "lexci_common", "lexci_logging")


def _effective_log_level(
    verbose: bool,
    verbose_debug: bool,
    log_level: str | None,
) -> str | None:
    """Pick the log level implied by the CLI flags.

    Returns
    -------
    str | None
        Level name, or None to fall back to ``LEXCI_LOG_LEVEL``
    """
    if log_level:
        return log_level
    if verbose or verbose_debug:
        return LogLevel.DEBUG.value
    return None


def _configure_package_loggers(
    level: str | None,
    verbose: bool,
    verbose_debug: bool,
) -> None:
    # -v keeps DEBUG records out of the console; they go to LEXCI_LOG_FILE
    to_console = verbose_debug or not verbose
    for pkg_name in LOGGING_PACKAGES:
        configure_logger(
            pkg_name,
            profile="cli",
            level=level,
            to_console=to_console,
        )


class Context:
    """CLI context object for sharing state between commands."""

    def __init__(self, repo_root: Path | None = None) -> None:
        """Initialize CLI context.

        Parameters
        ----------
        repo_root : Path, optional
            Repository root directory. If not provided, will be auto-detected.
        """
        self.verbose: bool = False
        self.verbose_debug: bool = False
        self.repo_root: Path = repo_root or detect_repo_root()

        # Snapshot once; every command resolves signals from the same view
        self.env: dict[str, str] = dict(os.environ)

        self._settings: ProjectSettings | None = None
        self._output: OutputStrategy | None = None

    @property
    def settings(self) -> ProjectSettings:
        """Tool and layout settings from ``.lexci.yaml`` merged over defaults."""
        if self._settings is None:
            self._settings = load_project_settings(self.repo_root)
        return self._settings

    @property
    def output(self) -> OutputStrategy:
        """Get output strategy singleton instance.

        Returns
        -------
        OutputStrategy
            Output strategy configured with current verbosity
        """
        if self._output is None:
            verbosity = Verbosity.from_flags(self.verbose, self.verbose_debug)
            self._output = OutputStrategy(verbosity=verbosity)
        return self._output


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show subproject details and log DEBUG records to the log file",
)
@click.option(
    "--verbose-debug",
    "-vvv",
    is_flag=True,
    help="Show everything, including DEBUG log records on stderr",
)
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in ALL_LOG_LEVELS]),
    help="Set logging level",
)
@click.option(
    "--repo-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Repository root (default: auto-detected)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    verbose_debug: bool,
    log_level: str | None,
    repo_root: Path | None,
) -> None:
    """lexical-ci - test matrix runner for the lexical workspace.

    \b
    Builds and tests lexical-core across its feature combinations, then
    runs the optional lexical-capi and lexical-derive suites.
    """  # noqa: W605
    if ctx.obj is None:
        ctx.obj = Context(repo_root.resolve() if repo_root else None)
    lexci_ctx: Context = ctx.obj
    lexci_ctx.verbose = verbose
    lexci_ctx.verbose_debug = verbose_debug

    level = _effective_log_level(verbose, verbose_debug, log_level)
    _configure_package_loggers(level, verbose, verbose_debug)
    logger.info("lexical-ci starting with repo root: %s", lexci_ctx.repo_root)


cli.add_command(run.run)
cli.add_command(config.group)
cli.add_command(matrix.group)


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show lexical-ci information."""
    lexci_ctx: Context = ctx.obj
    output = lexci_ctx.output

    output.section("lexical-ci Information", Icons.INFO)

    output.plain(f"lexical-ci v{__import__('lexci_cli').__version__}")
    output.plain(f"Repository root: {lexci_ctx.repo_root}")
    config_path = get_project_config_path(lexci_ctx.repo_root)
    state = "found" if config_path.exists() else "not found, using defaults"
    output.plain(f"Project config: {config_path} ({state})")
    output.plain(f"Python executable: {sys.executable}")

    if lexci_ctx.verbose or lexci_ctx.verbose_debug:
        output.plain("")
        output.subsection("Logging")
        mode = "debug" if lexci_ctx.verbose_debug else "verbose"
        output.plain(f"Verbose mode: {mode}")
        for name in (EnvVars.LOG_LEVEL, EnvVars.LOG_FILE, EnvVars.REPO_ROOT):
            output.plain(f"{name}: {reader.read_str(name, default='not set')}")


def main() -> None:
    """Run the ``lexci`` console script."""
    cli(prog_name="lexci")


if __name__ == "__main__":
    main()
