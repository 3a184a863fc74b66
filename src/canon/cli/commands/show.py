"""Show command implementation."""

import click
from rich.console import Console
from rich.table import Table

from canon.cli.context import CliContext
from canon.cli.error_boundary import cli_error_boundary
from canon.cli.output import machine_output
from canon.listing import listing, render
from canon.registry import Registry


def _render_table(registry: Registry) -> Table:
    """Build a table with one row per record and one column per field.

    Columns follow the order in which fields first appear across records.
    """
    data = listing(registry)
    columns: list[str] = []
    for record in data.values():
        for field in record:
            if field not in columns:
                columns.append(field)

    table = Table(title=registry.name, show_header=True, header_style="bold")
    table.add_column("key", style="cyan", no_wrap=True)
    for column in columns:
        table.add_column(column)

    for key, record in data.items():
        cells = [str(record[column]) if column in record else "" for column in columns]
        table.add_row(key, *cells)

    return table


@click.command("show")
@click.argument("name")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml", "table"]),
    default="json",
    show_default=True,
    help="Listing format.",
)
@click.pass_obj
@cli_error_boundary
def show_cmd(ctx: CliContext, name: str, fmt: str) -> None:
    """Print every record of registry NAME, transformed, in declaration order."""
    registry = ctx.open_registry(name)

    if fmt == "table":
        Console().print(_render_table(registry))
        return

    machine_output(render(registry, fmt).rstrip("\n"))
