"""Create command for fragments."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from pyfragments.cli.utils import auth
from pyfragments.cli.utils.output import read_payload
from pyfragments.exceptions import FragmentsError

console = Console()


def main(
    content_type: str = typer.Option(
        "text/plain", "--type", "-t", help="Content type of the new fragment"
    ),
    text: Optional[str] = typer.Option(None, help="Text content"),
    file: Optional[Path] = typer.Option(
        None, exists=True, dir_okay=False, help="Read content from a file"
    ),
    json_value: Optional[str] = typer.Option(None, "--json", help="JSON content"),
    api_url: Optional[str] = typer.Option(None, help="Fragments API root URL"),
    token: Optional[str] = typer.Option(None, help="Bearer token to use"),
):
    """Create a fragment from text, a file or a JSON document."""
    payload = read_payload(text, file, json_value)
    client = auth.get_client(api_url)
    credentials = auth.get_auth(token)

    try:
        fragment = client.create(credentials, payload, content_type)
    except FragmentsError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    console.print(
        f"Created fragment [bold]{fragment.id}[/bold] "
        f"({fragment.content_type}, {fragment.size} bytes)"
    )
