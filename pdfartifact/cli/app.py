"""Main Typer application — imports and registers all CLI commands.

Entry point: ``pdfartifact`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from pdfartifact.cli.commands.apply import apply_cmd
from pdfartifact.cli.commands.destroy import destroy_cmd
from pdfartifact.cli.commands.refresh import refresh_cmd
from pdfartifact.cli.commands.show import schema_cmd, show_cmd
from pdfartifact.config import config

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pdfartifact",
    help="Render PDFs to local files and track them by checksum.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="apply", help="Create or replace a pdf resource.")(apply_cmd)
app.command(name="refresh", help="Verify a tracked pdf against its identity.")(refresh_cmd)
app.command(name="destroy", help="Delete a tracked pdf.")(destroy_cmd)
app.command(name="show", help="List tracked pdf resources.")(show_cmd)
app.command(name="schema", help="Describe the pdf resource attributes.")(schema_cmd)


def _configure_logging(level: str) -> None:
    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    root = logging.getLogger("pdfartifact")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        config.log_level, "--log-level", help="Logging level for pdfartifact."
    ),
) -> None:
    """Render PDFs to local files and track them by checksum."""
    _configure_logging("DEBUG" if config.debug else log_level)
    logger.debug("Environment: %s", config.environment)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
