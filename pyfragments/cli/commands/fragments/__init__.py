"""Fragment commands for the pyfragments CLI."""

import typer

from . import convert, create, delete, get, list_fragments, update

app = typer.Typer(help="Fragment commands")
app.command("list", help="List your fragments")(list_fragments.main)
app.command("create", help="Create a fragment")(create.main)
app.command("get", help="Show a fragment's content")(get.main)
app.command("update", help="Replace a fragment's content")(update.main)
app.command("delete", help="Delete a fragment")(delete.main)
app.command("convert", help="Show a fragment converted to another format")(
    convert.main
)
