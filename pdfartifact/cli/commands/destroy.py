"""``pdfartifact destroy NAME`` — delete a tracked PDF and forget it."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from pdfartifact.cli.commands._common import build_reconciler, state_option
from pdfartifact.errors import PdfArtifactError

console = Console()


def destroy_cmd(
    name: str = typer.Argument(..., help="Tracked resource name."),
    state_path: Path = state_option(),
) -> None:
    """Remove the file. Destroying an untracked name is not an error."""
    try:
        removed = build_reconciler(state_path).destroy(name)
    except PdfArtifactError as exc:
        console.print(f"[bold red]Destroy failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    if removed:
        console.print(f"[green]{name}[/green] destroyed")
    else:
        console.print(f"[dim]{name} is not tracked; nothing to destroy.[/dim]")
