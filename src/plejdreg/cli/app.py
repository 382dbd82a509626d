from __future__ import annotations

from typing import Annotated

import typer

from plejdreg.utils.logging import setup_logging

from . import config as config_cmd
from .outputs import register as register_outputs
from .scenes import register as register_scenes
from .site import register as register_site

app = typer.Typer(
    help="plejdreg - inspect the device registry of a Plejd mesh", no_args_is_help=True
)

app.add_typer(config_cmd.app, name="config")

register_outputs(app)
register_scenes(app)
register_site(app)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
) -> None:
    """plejdreg CLI."""
    setup_logging()

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"plejdreg version {get_version('plejdreg')}")
        raise typer.Exit()
