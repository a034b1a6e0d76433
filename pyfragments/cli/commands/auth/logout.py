"""Logout command for the pyfragments CLI."""

import typer
from rich.console import Console

from pyfragments.cli.utils import auth

app = typer.Typer(help="Forget the stored bearer token")
console = Console()


@app.callback(invoke_without_command=True)
def main():
    """Remove the stored token and session."""
    username = auth.load_session_username()
    if not username:
        console.print("[yellow]Not logged in[/yellow]")
        return

    auth.remove_session(username)
    console.print(f"Logged out [bold]{username}[/bold]")
