"""Inspect the feature matrix."""

import click

from lexci_cli.core.constants import Icons
from lexci_cli.core.decorators import handle_exceptions
from lexci_cli.services.ci import (
    SubprojectKind,
    build_feature_matrix,
    resolve_execution_config,
)


@click.group(name="matrix")
def group() -> None:
    """Feature matrix inspection."""


@group.command(name="list")
@click.option(
    "--family",
    "-f",
    type=click.Choice([kind.value for kind in SubprojectKind]),
    default=SubprojectKind.CORE.value,
    show_default=True,
    help="Subproject family to list",
)
@click.pass_context
@handle_exceptions
def list_feature_sets(ctx: click.Context, family: str) -> None:
    """List the feature sets tested in isolation, in run order."""
    cli_ctx = ctx.obj
    output = cli_ctx.output

    config = resolve_execution_config(cli_ctx.env, cli_ctx.settings)
    feature_sets = build_feature_matrix(config).for_family(SubprojectKind(family))

    output.section(f"Feature sets ({family})", Icons.LIST)
    if not feature_sets:
        output.plain("(none)")
        return
    for feature_set in feature_sets:
        output.plain(feature_set.flag_string)
    output.info(f"{len(feature_sets)} feature sets")
