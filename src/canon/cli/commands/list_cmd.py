"""List command implementation."""

import click

from canon.cli.context import CliContext
from canon.cli.error_boundary import cli_error_boundary
from canon.cli.output import machine_output, user_output
from canon.registry import Registry


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: CliContext) -> None:
    """List the registries declared in the manifest with their record counts."""
    configs = ctx.registry_configs()
    if not configs:
        user_output("No registries declared")
        return

    for config in configs:
        registry = Registry.from_config(config)
        machine_output(f"{registry.name}\t{len(registry)}\t{config.data_source.describe()}")
