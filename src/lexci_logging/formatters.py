"""Log record formatters."""

import logging

import click

DEFAULT_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
CONSOLE_FORMAT = "%(levelname)-5s %(message)s"

_LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARN": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


class SafeFormatter(logging.Formatter):
    """Formatter with short, fixed-width level names.

    ``WARNING`` is rendered as ``WARN`` so columns line up in log files.
    """

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt or DEFAULT_FORMAT, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        if original == "WARNING":
            record.levelname = "WARN"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class ColoredFormatter(SafeFormatter):
    """Console formatter that colours the level name."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ) -> None:
        super().__init__(fmt or CONSOLE_FORMAT, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        try:
            if record.levelname == "WARNING":
                record.levelname = "WARN"
            color = _LEVEL_COLORS.get(record.levelname)
            if self.use_colors and color:
                record.levelname = click.style(f"{record.levelname:<5}", fg=color)
            return logging.Formatter.format(self, record)
        finally:
            record.levelname = original
