"""Delete command for fragments."""

from typing import Optional

import typer
from rich.console import Console

from pyfragments.cli.utils import auth
from pyfragments.exceptions import FragmentsError

console = Console()


def main(
    fragment_id: str = typer.Argument(..., help="ID of the fragment to delete"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Delete without confirmation"
    ),
    api_url: Optional[str] = typer.Option(None, help="Fragments API root URL"),
    token: Optional[str] = typer.Option(None, help="Bearer token to use"),
):
    """Delete a fragment."""
    if not force:
        confirmed = typer.confirm(
            f"Are you sure you want to delete fragment {fragment_id}?"
        )
        if not confirmed:
            console.print("Deletion cancelled")
            return

    client = auth.get_client(api_url)
    credentials = auth.get_auth(token)

    try:
        confirmation = client.delete(credentials, fragment_id)
    except FragmentsError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    console.print(
        f"Deleted fragment [bold]{fragment_id}[/bold] (status: {confirmation.status})"
    )
