"""CLI entrypoint that wires subcommands into a Typer app."""

import logging

import typer

from ..commands.list.cli import app as list_app
from ..commands.sync.cli import app as sync_app

app = typer.Typer(add_completion=False, help="Mirror every GitHub repository of an account onto local disk.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only warnings and errors"),
):
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(message)s", force=True)


app.add_typer(sync_app, help="Clone or update a mirror of every repository")
app.add_typer(list_app, help="List the account's repositories")
