"""Check command implementation."""

import json

import click

from canon.cli.context import CliContext
from canon.cli.error_boundary import cli_error_boundary
from canon.cli.output import user_output
from canon.testing import describe_mismatch


@click.command("check")
@click.argument("name")
@click.argument("key")
@click.argument("value")
@click.pass_obj
@cli_error_boundary
def check_cmd(ctx: CliContext, name: str, key: str, value: str) -> None:
    """Check that VALUE (a JSON document) is exactly NAME[KEY].

    Exits 0 on a match and 1 on a mismatch, listing every differing field.
    """
    try:
        produced = json.loads(value)
    except json.JSONDecodeError as err:
        raise ValueError(f"VALUE is not valid JSON: {err}") from err

    registry = ctx.open_registry(name)
    problems = describe_mismatch(registry, key, produced)
    if problems:
        user_output(click.style("Mismatch: ", fg="red") + f"{name}[{key!r}]")
        for problem in problems:
            user_output(f"  - {problem}")
        raise SystemExit(1)

    user_output(click.style("Match: ", fg="green") + f"{name}[{key!r}]")
