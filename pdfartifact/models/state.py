"""Tracked resource entries persisted by the state store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pdfartifact.models.artifacts import PdfArtifactConfig


class StateEntry(BaseModel):
    """The last known identity of a named ``pdf`` resource.

    The identity is what the orchestrator persists and compares across
    reconciliation cycles.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    config: PdfArtifactConfig
    identity: str
