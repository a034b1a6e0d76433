"""Status command for the pyfragments CLI."""

import typer
from rich.console import Console

from pyfragments.cli.utils import auth
from pyfragments.utils import token_exists_in_keyring

app = typer.Typer(help="Check authentication status")
console = Console()


@app.callback(invoke_without_command=True)
def main():
    """Check authentication status."""
    username = auth.load_session_username()
    if not username:
        console.print("[yellow]Not logged in[/yellow]")
        return

    if token_exists_in_keyring(username):
        console.print(f"[green]Logged in as:[/green] [bold]{username}[/bold]")
    else:
        console.print("[yellow]Session exists but no token is stored[/yellow]")
