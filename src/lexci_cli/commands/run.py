"""Run the CI test matrix."""

import click

from lexci_cli.core.constants import Icons
from lexci_cli.core.decorators import handle_exceptions
from lexci_cli.managers import MatrixOrchestrator
from lexci_cli.services.ci import evaluate_exit_gate
from lexci_cli.services.command_executor import CommandExecutor
from lexci_logging import get_cli_logger

logger = get_cli_logger(__name__)


@click.command(name="run")
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    help="Print the ordered command list without executing anything",
)
@click.pass_context
@handle_exceptions
def run(ctx: click.Context, dry_run: bool) -> None:
    """Build and test every subproject under the resolved feature matrix.

    \b
    Signals are read for presence only:
      CI, DISABLE_CROSS, TARGET, NO_STD, DISABLE_PROPERTY_TESTS,
      ENABLE_LIBM, DISABLE_DOCTESTS, NO_FEATURES, DISABLE_TESTS,
      DISABLE_BENCHES, ENABLE_FFI_TESTS, ENABLE_DERIVE_TESTS
    A non-empty TRAVIS_TAG skips the run with success.
    """  # noqa: W605
    cli_ctx = ctx.obj
    output = cli_ctx.output

    # Deploy builds stop here, before any settings or config are read
    gate = evaluate_exit_gate(cli_ctx.env)
    if gate.skip:
        logger.info("Exit gate: %s", gate.reason)
        output.plain(f"{Icons.SKIPPED} Skipping test matrix: {gate.reason}")
        return

    executor = CommandExecutor(output=output, dry_run=dry_run)
    orchestrator = MatrixOrchestrator(
        repo_root=cli_ctx.repo_root,
        command_executor=executor,
        env=cli_ctx.env,
        settings=cli_ctx.settings,
        output=output,
    )
    result = orchestrator.run()

    if dry_run:
        output.success(f"{Icons.SUCCESS} {result.commands_issued} commands planned")
    else:
        output.success(
            f"{Icons.SUCCESS} All {result.commands_issued} commands succeeded",
        )
