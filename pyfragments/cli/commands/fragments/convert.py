"""Convert command for fragments."""

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
    target: str = typer.Argument(..., help="Target extension, e.g. html, txt, png"),
    source_type: Optional[str] = typer.Option(
        None, "--from", help="Fragment's content type (checked in strict mode)"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save to file"),
    api_url: Optional[str] = typer.Option(None, help="Fragments API root URL"),
    token: Optional[str] = typer.Option(None, help="Bearer token to use"),
):
    """Fetch a converted representation of a fragment."""
    client = auth.get_client(api_url)
    credentials = auth.get_auth(token)

    try:
        payload = client.read_as(
            credentials, fragment_id, target, source_type=source_type
        )
    except FragmentsError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    print_payload(payload, output)
