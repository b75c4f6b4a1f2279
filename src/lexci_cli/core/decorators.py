"""Custom Click decorators for common CLI patterns."""

import functools
import traceback
from collections.abc import Callable
from typing import Any, TypeVar

import click

from lexci_cli.core.constants import ExitCode
from lexci_cli.core.output import OutputStrategy
from lexci_common.errors import LexciError
from lexci_logging import get_cli_logger

logger = get_cli_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _output_for(ctx: click.Context) -> OutputStrategy:
    output = getattr(ctx.obj, "output", None)
    if isinstance(output, OutputStrategy):
        return output
    return OutputStrategy.from_click_context(ctx)


def handle_exceptions(func: F) -> F:
    """Convert errors into exit codes at the CLI boundary.

    A failed command exits with that command's own status, or ``128 + signal``
    when it was killed. Other lexical-ci errors exit with their ``exit_code``;
    anything unexpected exits 1 with a traceback in ``-vvv`` mode.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except click.exceptions.Exit:
            raise
        except KeyboardInterrupt:
            ctx = click.get_current_context()
            _output_for(ctx).error("Interrupted")
            ctx.exit(ExitCode.GENERAL_ERROR)
        except LexciError as e:
            ctx = click.get_current_context()
            _output_for(ctx).error(str(e))
            ctx.exit(e.exit_code)
        except Exception as e:
            ctx = click.get_current_context()
            output = _output_for(ctx)
            output.error(f"Unexpected error: {e}")
            if getattr(ctx.obj, "verbose_debug", False):
                output.error("Full traceback:")
                output.error(traceback.format_exc())
            else:
                output.plain("Re-run with -vvv for full traceback", err=True)
            logger.debug("Unhandled exception", exc_info=True)
            ctx.exit(ExitCode.GENERAL_ERROR)

    return wrapper  # type: ignore[return-value]
