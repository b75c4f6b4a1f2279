"""Logger configuration profiles."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from lexci_common.env import reader
from lexci_logging.formatters import ColoredFormatter, SafeFormatter

LOG_LEVEL_ENV_VAR = "LEXCI_LOG_LEVEL"
LOG_FILE_ENV_VAR = "LEXCI_LOG_FILE"
NO_FILE_LOGGING_ENV_VAR = "LEXCI_NO_FILE_LOGGING"

DEFAULT_LOG_LEVEL = "WARNING"
PROFILES = ("cli", "test", "custom")


def get_log_level() -> str:
    """Get the configured log level name (``LEXCI_LOG_LEVEL``)."""
    level = reader.read_str(LOG_LEVEL_ENV_VAR, default=DEFAULT_LOG_LEVEL)
    return (level or DEFAULT_LOG_LEVEL).upper()


def should_use_file_logging() -> bool:
    """Check whether file logging is enabled and a log file is configured."""
    if reader.read_bool(NO_FILE_LOGGING_ENV_VAR, False):
        return False
    return bool(reader.read_str(LOG_FILE_ENV_VAR))


def get_cli_logger(name: str) -> logging.Logger:
    """Get a logger for a CLI module.

    Handlers are attached by :func:`configure_logger` on the package loggers;
    module loggers only propagate to them.
    """
    return logging.getLogger(name)


def _file_handler(log_file: str | None) -> logging.Handler | None:
    path = log_file or reader.read_str(LOG_FILE_ENV_VAR)
    if not path:
        return None
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(SafeFormatter())
    return handler


def configure_logger(
    name: str,
    profile: str = "cli",
    level: str | None = None,
    to_console: bool = False,
    log_file: str | None = None,
    formatter: logging.Formatter | None = None,
    handlers: list[logging.Handler] | None = None,
) -> logging.Logger:
    """Configure a logger according to a named profile.

    Parameters
    ----------
    name : str
        Logger name, usually a top-level package
    profile : str
        ``cli`` (file logging, optional console on stderr), ``test`` (DEBUG,
        propagate to pytest's capture) or ``custom`` (caller supplies handlers)
    level : str | None
        Level name; defaults to :func:`get_log_level`
    to_console : bool
        Also log to stderr
    log_file : str | None
        Explicit log file path; falls back to ``LEXCI_LOG_FILE``
    formatter : logging.Formatter | None
        Formatter for the console handler (``custom`` profile)
    handlers : list[logging.Handler] | None
        Extra handlers (``custom`` profile)

    Returns
    -------
    logging.Logger
        The configured logger

    Raises
    ------
    ValueError
        If the profile is unknown
    """
    if profile not in PROFILES:
        msg = f"Unknown profile: {profile}"
        raise ValueError(msg)

    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    if profile == "test":
        logger.setLevel(logging.DEBUG)
        logger.propagate = True
        return logger

    logger.setLevel((level or get_log_level()).upper())
    logger.propagate = False

    if to_console:
        console = logging.StreamHandler(sys.stderr)
        if formatter is not None:
            console.setFormatter(formatter)
        else:
            console.setFormatter(ColoredFormatter(use_colors=sys.stderr.isatty()))
        logger.addHandler(console)

    if should_use_file_logging() or log_file:
        file_handler = _file_handler(log_file)
        if file_handler is not None:
            logger.addHandler(file_handler)

    for handler in handlers or []:
        logger.addHandler(handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
