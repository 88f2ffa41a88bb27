"""Shared option and wiring helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer

from pdfartifact.config import config
from pdfartifact.core.reconciler import Reconciler
from pdfartifact.core.resource import PdfResource
from pdfartifact.core.state_store import StateStore


def state_option() -> Path:
    return typer.Option(
        config.state_path,
        "--state",
        "-s",
        help="Path to the state JSON file.",
    )


def build_reconciler(state_path: Path) -> Reconciler:
    """Wire a ``Reconciler`` over the state file at *state_path*."""
    resource = PdfResource(strict_delete=config.strict_delete)
    return Reconciler(resource, StateStore(state_path))
