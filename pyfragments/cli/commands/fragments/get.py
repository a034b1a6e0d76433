"""Get command for fragments."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from pyfragments.cli.utils import auth
from pyfragments.cli.utils.output import print_payload
from pyfragments.exceptions import FragmentsError

console = Console()


def main(
    fragment_id: str = typer.Argument(..., help="ID of the fragment"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save to file"),
    api_url: Optional[str] = typer.Option(None, help="Fragments API root URL"),
    token: Optional[str] = typer.Option(None, help="Bearer token to use"),
):
    """Show a fragment's content."""
    client = auth.get_client(api_url)
    credentials = auth.get_auth(token)

    try:
        payload = client.read(credentials, fragment_id)
    except FragmentsError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    print_payload(payload, output)
