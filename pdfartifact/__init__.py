"""pdfartifact: a managed ``pdf`` resource tracked by content checksum.

Renders a PDF from a header/content pair, writes it to a local path and
identifies the result by the SHA-1 of the rendered bytes:
  - Create renders, writes and hashes the file
  - Read re-hashes the file and reports drift as absence
  - Delete removes the file
"""

__version__ = "0.1.0"
__description__ = "Render a PDF and write to a local file, tracked by checksum."

from pdfartifact.core.resource import PdfResource
from pdfartifact.models.artifacts import ArtifactState, PdfArtifactConfig, ResourceResult

__all__ = [
    "PdfResource",
    "PdfArtifactConfig",
    "ResourceResult",
    "ArtifactState",
    "__version__",
]
