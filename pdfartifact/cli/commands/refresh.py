"""``pdfartifact refresh NAME`` — verify a tracked PDF against its identity."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from pdfartifact.cli.commands._common import build_reconciler, state_option
from pdfartifact.errors import PdfArtifactError

console = Console()


def refresh_cmd(
    name: str = typer.Argument(..., help="Tracked resource name."),
    state_path: Path = state_option(),
) -> None:
    """Re-hash the file; forget the resource if it is missing or modified."""
    try:
        result = build_reconciler(state_path).refresh(name)
    except KeyError:
        console.print(f"[bold red]Not tracked:[/bold red] {name}")
        raise typer.Exit(code=1)
    except PdfArtifactError as exc:
        console.print(f"[bold red]Refresh failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    if result.present:
        console.print(f"[green]{name}[/green] present  {result.identity}")
    else:
        console.print(
            f"[yellow]{name}[/yellow] absent  "
            f"[dim]{result.filename} is missing or was modified; "
            f"it will be recreated on next apply.[/dim]"
        )
