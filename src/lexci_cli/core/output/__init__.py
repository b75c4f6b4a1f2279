"""Output strategy module for CLI output with verbosity contracts.

Usage
-----
>>> from lexci_cli.core.output import OutputStrategy, Verbosity
>>> output = OutputStrategy(Verbosity.VERBOSE)
>>> output.success("Matrix complete")
>>> output.info("Only shown with -v")
"""

from lexci_cli.core.output.strategy import OutputStrategy
from lexci_cli.core.output.verbosity import Verbosity

__all__ = [
    "OutputStrategy",
    "Verbosity",
]
