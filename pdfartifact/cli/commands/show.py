"""``pdfartifact show`` and ``pdfartifact schema`` — tabular views."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdfartifact.cli.commands._common import state_option
from pdfartifact.core.state_store import StateStore
from pdfartifact.errors import StateError
from pdfartifact.models.schema import RESOURCE_SCHEMA

console = Console()


def show_cmd(state_path: Path = state_option()) -> None:
    """List tracked resources and their recorded identities."""
    try:
        store = StateStore(state_path)
    except StateError as exc:
        console.print(f"[bold red]State error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    entries = store.list_entries()
    if not entries:
        console.print("[dim]No resources tracked.[/dim]")
        return

    table = Table(title=f"Tracked PDFs ({store.path})")
    table.add_column("Name", style="cyan")
    table.add_column("Header")
    table.add_column("Filename")
    table.add_column("Identity", style="green")
    for entry in entries:
        table.add_row(
            entry.name,
            escape(entry.config.header),
            str(entry.config.filename),
            entry.identity,
        )
    console.print(table)


def schema_cmd() -> None:
    """Describe the ``pdf`` resource attributes."""
    table = Table(title=f"{RESOURCE_SCHEMA.type_name}: {RESOURCE_SCHEMA.description}")
    table.add_column("Attribute", style="cyan")
    table.add_column("Type")
    table.add_column("Required", justify="center")
    table.add_column("Forces new", justify="center")
    table.add_column("Description")
    for attribute in RESOURCE_SCHEMA.attributes:
        table.add_row(
            attribute.name,
            attribute.type,
            "Yes" if attribute.required else "No",
            "Yes" if attribute.force_new else "No",
            attribute.description,
        )
    console.print(table)
