"""Exception hierarchy for the ``pdf`` resource.

Only fatal conditions are exceptions. A missing file on read, a checksum
mismatch on read and deleting an already-missing file are reported through
the returned ``ResourceResult`` instead.
"""

from __future__ import annotations


class PdfArtifactError(RuntimeError):
    """Base class for all pdfartifact errors."""


class ConfigError(PdfArtifactError, ValueError):
    """Raised when resource attributes fail validation at the boundary."""


class RenderError(PdfArtifactError):
    """Raised when the PDF cannot be rendered or written to its path."""


class ChecksumError(PdfArtifactError):
    """Raised when an existing file cannot be read back for hashing."""


class DeleteError(PdfArtifactError):
    """Raised when removing the file fails for a reason other than absence."""


class StateError(PdfArtifactError):
    """Raised when the local state file cannot be loaded or written."""


class InvalidTransitionError(PdfArtifactError):
    """Raised when a lifecycle transition is not in the transition table."""
