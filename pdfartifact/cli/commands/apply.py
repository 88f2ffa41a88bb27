"""``pdfartifact apply NAME`` — create or replace a ``pdf`` resource.

Refreshes the recorded identity first, so a file deleted or modified out
of band is recreated. A change to any attribute replaces the file.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from pdfartifact.cli.commands._common import build_reconciler, state_option
from pdfartifact.core.reconciler import ApplyAction
from pdfartifact.errors import PdfArtifactError
from pdfartifact.models.artifacts import PdfArtifactConfig

console = Console()

_ACTION_STYLE = {
    ApplyAction.CREATE: ("green", "created"),
    ApplyAction.REPLACE: ("yellow", "replaced"),
    ApplyAction.NOOP: ("dim", "unchanged"),
}


def apply_cmd(
    name: str = typer.Argument(..., help="Resource name to track the PDF under."),
    header: str = typer.Option(..., "--header", "-H", help="Header/title of PDF."),
    content: str = typer.Option(..., "--content", "-c", help="Content of PDF."),
    filename: Path = typer.Option(
        ..., "--filename", "-f", help="The path to the PDF file that will be created."
    ),
    state_path: Path = state_option(),
) -> None:
    """Render the PDF if it is missing, drifted, or its attributes changed."""
    try:
        pdf_config = PdfArtifactConfig.from_attributes(
            {"header": header, "content": content, "filename": filename}
        )
        outcome = build_reconciler(state_path).apply(name, pdf_config)
    except PdfArtifactError as exc:
        console.print(f"[bold red]Apply failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    style, verb = _ACTION_STYLE[outcome.action]
    lines = [
        f"[bold {style}]{name} {verb}[/bold {style}]",
        "",
        f"[bold]File:[/bold]      {outcome.result.filename}",
        f"[bold]Identity:[/bold]  {outcome.result.identity}",
    ]
    if outcome.replaced_attributes:
        lines.append(f"[bold]Changed:[/bold]   {', '.join(outcome.replaced_attributes)}")

    console.print(Panel("\n".join(lines), title="[bold]pdf[/bold]", border_style=style))
