"""Verbosity levels for CLI output."""

from enum import IntEnum


class Verbosity(IntEnum):
    """How much the CLI prints.

    - NORMAL: commands, results, errors, warnings
    - VERBOSE: ``-v``, adds phase details
    - DEBUG: ``-vvv``, adds resolution traces
    """

    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2

    @classmethod
    def from_flags(
        cls,
        verbose: bool = False,
        verbose_debug: bool = False,
    ) -> "Verbosity":
        """Map the ``-v`` / ``-vvv`` flags to a level."""
        if verbose_debug:
            return cls.DEBUG
        if verbose:
            return cls.VERBOSE
        return cls.NORMAL
