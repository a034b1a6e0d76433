"""Login command for the pyfragments CLI."""

from typing import Optional

import typer
from rich.console import Console

from pyfragments.cli.utils import auth

app = typer.Typer(help="Store a bearer token")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    token: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="Bearer (ID) token from the identity provider",
    ),
    username: str = typer.Option(
        ..., prompt=True, help="Name to store the token under"
    ),
    api_url: Optional[str] = typer.Option(None, help="Fragments API root URL"),
    save_config: bool = typer.Option(
        False, help="Save username and API URL to config file"
    ),
):
    """Store a bearer token in the system keyring."""
    auth.save_session(username, token)

    if save_config:
        config = auth.load_config()
        config["username"] = username
        if api_url:
            config["api_url"] = api_url
        auth.save_config(config)

    console.print(f"Token stored for [bold]{username}[/bold]")
