"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from mdblog.cli.commands import list_cmd, show_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Markdown blog post listing and rendering")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Markdown blog post listing and rendering."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
