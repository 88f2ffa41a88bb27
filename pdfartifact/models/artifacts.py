"""PDF artifact models — validated attributes, lifecycle states, results."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pdfartifact.errors import ConfigError


class ArtifactState(str, Enum):
    """Lifecycle state of a PDF artifact."""

    ABSENT = "absent"
    PRESENT = "present"


# Create moves ABSENT -> PRESENT. Read keeps PRESENT or drops to ABSENT when
# the file is missing or has drifted. Delete moves PRESENT -> ABSENT.
# There is no update: attribute changes are delete-then-create.
VALID_TRANSITIONS: dict[ArtifactState, set[ArtifactState]] = {
    ArtifactState.ABSENT: {ArtifactState.PRESENT},
    ArtifactState.PRESENT: {ArtifactState.PRESENT, ArtifactState.ABSENT},
}


class PdfArtifactConfig(BaseModel):
    """The three attributes of a ``pdf`` resource, validated once.

    All attributes are immutable after creation; a change to any of them
    means the artifact must be recreated.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    header: str = Field(min_length=1)
    content: str
    filename: Path

    @field_validator("filename", mode="before")
    @classmethod
    def _filename_not_blank(cls, value: Any) -> Any:
        if isinstance(value, (str, Path)) and str(value).strip() in ("", "."):
            raise ValueError("filename must not be empty")
        return value

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> PdfArtifactConfig:
        """Build a config from the named attributes passed by the host.

        Raises
        ------
        ConfigError
            If an attribute is missing, unknown, of the wrong type, or
            ``header``/``filename`` is empty.
        """
        try:
            return cls.model_validate(dict(attributes))
        except ValidationError as exc:
            raise ConfigError(f"Invalid pdf resource attributes: {exc}") from exc

    def attributes(self) -> dict[str, str]:
        """Return the attributes as plain strings, keyed by schema name."""
        return {
            "header": self.header,
            "content": self.content,
            "filename": str(self.filename),
        }


class ResourceResult(BaseModel):
    """Outcome of a lifecycle operation.

    ``identity`` is the SHA-1 hex digest of the file at ``filename``; an
    empty identity means the artifact is not present.
    """

    model_config = ConfigDict(frozen=True)

    filename: Path
    identity: str = ""

    @classmethod
    def absent(cls, filename: Path) -> ResourceResult:
        return cls(filename=filename, identity="")

    @property
    def state(self) -> ArtifactState:
        return ArtifactState.PRESENT if self.identity else ArtifactState.ABSENT

    @property
    def present(self) -> bool:
        return self.state == ArtifactState.PRESENT
