"""Inspect the resolved execution configuration."""

import json

import click

from lexci_cli.core.constants import Icons
from lexci_cli.core.decorators import handle_exceptions
from lexci_cli.services.ci import evaluate_exit_gate, resolve_execution_config


@click.group(name="config")
def group() -> None:
    """Configuration inspection."""


@group.command(name="show")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
@handle_exceptions
def show(ctx: click.Context, as_json: bool) -> None:
    """Show the execution config the current environment resolves to."""
    cli_ctx = ctx.obj
    output = cli_ctx.output

    config = resolve_execution_config(cli_ctx.env, cli_ctx.settings)
    gate = evaluate_exit_gate(cli_ctx.env)
    data = config.as_dict()
    data["deploy_skip"] = gate.skip

    if as_json:
        output.plain(json.dumps(data, indent=2))
        return

    output.section("Execution Config", Icons.CONFIG)
    width = max(len(key) for key in data)
    for key, value in data.items():
        if isinstance(value, list):
            value = ", ".join(value) or "(none)"
        output.plain(f"{key:<{width}}  {value}")
