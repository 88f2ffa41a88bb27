"""pdfartifact data models — all Pydantic v2, all frozen (immutable)."""

from pdfartifact.models.artifacts import (
    VALID_TRANSITIONS,
    ArtifactState,
    PdfArtifactConfig,
    ResourceResult,
)
from pdfartifact.models.schema import RESOURCE_SCHEMA, AttributeSchema, ResourceSchema
from pdfartifact.models.state import StateEntry

__all__ = [
    # artifacts
    "ArtifactState",
    "VALID_TRANSITIONS",
    "PdfArtifactConfig",
    "ResourceResult",
    # schema
    "AttributeSchema",
    "ResourceSchema",
    "RESOURCE_SCHEMA",
    # state
    "StateEntry",
]
