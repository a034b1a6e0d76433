"""Reading payloads from the command line and printing decoded ones."""

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from pyfragments.services.fragments import (
    BinaryPayload,
    CollectionEntry,
    FragmentPayload,
    StructuredPayload,
)

console = Console()


def read_payload(
    text: Optional[str], file: Optional[Path], json_value: Optional[str]
) -> Any:
    """Exactly one of text, file contents (bytes) or a JSON document."""
    given = [v for v in (text, file, json_value) if v is not None]
    if len(given) != 1:
        console.print(
            "[bold red]Error:[/bold red] Provide exactly one of --text, --file or --json"
        )
        raise typer.Exit(1)
    if file is not None:
        return file.read_bytes()
    if json_value is not None:
        try:
            return json.loads(json_value)
        except ValueError as exc:
            console.print(f"[bold red]Error:[/bold red] Invalid JSON: {exc}")
            raise typer.Exit(1) from exc
    return text


def print_payload(payload: FragmentPayload, output: Optional[Path] = None) -> None:
    if isinstance(payload, BinaryPayload):
        if output is None:
            console.print(
                f"[yellow]{payload.content_type}[/yellow] content "
                f"({len(payload.data)} bytes); use --output to save it"
            )
            return
        output.write_bytes(payload.data)
        console.print(f"Saved {len(payload.data)} bytes to [bold]{output}[/bold]")
        return

    if isinstance(payload, StructuredPayload):
        rendered = json.dumps(payload.value, indent=2, ensure_ascii=False)
    else:
        rendered = payload.text
    if output is not None:
        output.write_text(rendered, encoding="utf-8")
        console.print(f"Saved to [bold]{output}[/bold]")
    elif isinstance(payload, StructuredPayload):
        console.print_json(rendered)
    else:
        console.print(rendered, markup=False, highlight=False)


def fragments_table(entries: List[CollectionEntry]) -> Table:
    table = Table("ID", "Type", "Size", "Updated", "Convert to")
    for entry in entries:
        f = entry.fragment
        last = f.last_modified
        table.add_row(
            f.id,
            f.content_type or "",
            "" if f.size is None else str(f.size),
            last.isoformat() if last else "",
            ", ".join(entry.conversions),
        )
    return table
