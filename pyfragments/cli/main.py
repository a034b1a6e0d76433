#!/usr/bin/env python
"""Command line interface for pyfragments."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from pyfragments.cli.commands import auth, fragments
from pyfragments.cli.utils import auth as auth_utils
from pyfragments.exceptions import FragmentsError

app = typer.Typer(help="Command Line Interface for a fragments server")
console = Console()

# Add command groups
app.add_typer(auth.app, name="auth")
app.add_typer(fragments.app, name="fragments")


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
    """Create, read, convert and delete fragments on a fragments server."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        )


@app.command("health")
def health(
    api_url: Optional[str] = typer.Option(None, help="Fragments API root URL"),
):
    """Check that the fragments server is reachable."""
    client = auth_utils.get_client(api_url)
    try:
        status = client.health()
    except FragmentsError as e:
        console.print(f"[bold red]API Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    console.print(f"[green]API Connected[/green] - Status: {status.status}")
    for key, value in status.details.items():
        console.print(f"  {key}: {value}")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
