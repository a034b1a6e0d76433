"""Authentication commands for the pyfragments CLI."""

import typer

from . import login, logout, status

app = typer.Typer(help="Manage the bearer token used for fragment requests")
app.add_typer(login.app, name="login")
app.add_typer(logout.app, name="logout")
app.add_typer(status.app, name="status")
