import logging
import os
from pathlib import Path

import click

from canon.cli.commands.check import check_cmd
from canon.cli.commands.get import get_cmd
from canon.cli.commands.list_cmd import list_cmd
from canon.cli.commands.serve import serve_cmd
from canon.cli.commands.show import show_cmd
from canon.cli.context import CliContext
from canon.config import DEFAULT_MANIFEST

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="canon-registry")
@click.option(
    "--manifest",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="CANON_MANIFEST",
    default=DEFAULT_MANIFEST,
    show_default=True,
    help="Registry manifest to read.",
)
@click.option("--debug", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, manifest: Path, debug: bool) -> None:
    """Look up, check and publish declared records."""
    debug = debug or os.environ.get("CANON_DEBUG", "false").lower() == "true"
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = CliContext(manifest=manifest, debug=debug)


cli.add_command(check_cmd)
cli.add_command(get_cmd)
cli.add_command(list_cmd)
cli.add_command(serve_cmd)
cli.add_command(show_cmd)


def main() -> None:
    """CLI entry point used by the `canon` console script."""
    cli()
