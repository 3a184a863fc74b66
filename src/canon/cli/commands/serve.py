"""Serve command implementation."""

import dataclasses

import click

from canon.cli.context import CliContext
from canon.config import ServerConfig
from canon.server.app import run


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: CANON_HOST or 0.0.0.0).")
@click.option("--port", type=int, default=None, help="Port to bind (default: CANON_PORT or 8000).")
@click.pass_obj
def serve_cmd(ctx: CliContext, host: str | None, port: int | None) -> None:
    """Serve every registry in the manifest over HTTP (GET only)."""
    config = dataclasses.replace(
        ServerConfig.from_env(),
        manifest=ctx.manifest,
        debug=ctx.debug,
    )
    if host is not None:
        config = dataclasses.replace(config, host=host)
    if port is not None:
        config = dataclasses.replace(config, port=port)
    run(config)
