"""Output routing for CLI commands.

Data goes to stdout so it can be piped; messages for humans go to stderr.
"""

from typing import Any

import click


def user_output(message: Any = "") -> None:
    """Print a message meant for a human reader (stderr)."""
    click.echo(message, err=True)


def machine_output(message: Any = "") -> None:
    """Print data meant for another program (stdout)."""
    click.echo(message)
