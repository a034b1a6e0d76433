"""List command for fragments."""

from typing import Optional

import typer
from rich.console import Console

from pyfragments.cli.utils import auth
from pyfragments.cli.utils.output import fragments_table
from pyfragments.exceptions import FragmentsError
from pyfragments.services.fragments import CollectionView

console = Console()


def main(
    api_url: Optional[str] = typer.Option(None, help="Fragments API root URL"),
    token: Optional[str] = typer.Option(None, help="Bearer token to use"),
):
    """List fragments, most recently updated first."""
    client = auth.get_client(api_url)
    credentials = auth.get_auth(token)

    try:
        fragments = client.list(credentials)
    except FragmentsError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    if not fragments:
        console.print("No fragments found")
        return

    console.print(fragments_table(CollectionView.entries(fragments)))
