"""Logging configuration for lexical-ci.

Usage
-----
>>> from lexci_logging import get_cli_logger
>>> logger = get_cli_logger(__name__)
>>> logger.debug("Executing: %s", "cargo build")
"""

from lexci_logging.config import (
    configure_logger,
    get_cli_logger,
    get_log_level,
    should_use_file_logging,
)
from lexci_logging.formatters import ColoredFormatter, SafeFormatter

__all__ = [
    "ColoredFormatter",
    "SafeFormatter",
    "configure_logger",
    "get_cli_logger",
    "get_log_level",
    "should_use_file_logging",
]
