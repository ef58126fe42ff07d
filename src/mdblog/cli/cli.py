"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from mdblog.cli.commands import list_cmd, serve_cmd, show_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Serve a directory of markdown and pug posts")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Serve a directory of markdown and pug posts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="serve")(serve_cmd)
