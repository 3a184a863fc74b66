"""Get command implementation."""

import json

import click

from canon.cli.context import CliContext
from canon.cli.error_boundary import cli_error_boundary
from canon.cli.output import machine_output
from canon.listing import to_json_safe


@click.command("get")
@click.argument("name")
@click.argument("key")
@click.pass_obj
@cli_error_boundary
def get_cmd(ctx: CliContext, name: str, key: str) -> None:
    """Print the record declared under KEY in registry NAME as JSON."""
    registry = ctx.open_registry(name)
    record = registry.lookup(key)
    machine_output(json.dumps(to_json_safe(record), indent=2, ensure_ascii=False))
