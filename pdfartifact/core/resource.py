"""The ``pdf`` resource: Create, Read and Delete.

State: absent -> present -> absent. There is no update; a change to any
attribute is handled by the caller as delete-then-create.

Operations take a validated ``PdfArtifactConfig`` (and, for Read, the
identity recorded at Create) and return a ``ResourceResult``. Fatal
conditions raise; absence is a result, not an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pdfartifact.core.hasher import file_checksum
from pdfartifact.core.pdf_writer import PdfWriter, ReportlabWriter
from pdfartifact.core.renderer import render_pdf
from pdfartifact.errors import ChecksumError, DeleteError
from pdfartifact.models.artifacts import PdfArtifactConfig, ResourceResult
from pdfartifact.models.schema import RESOURCE_SCHEMA

logger = logging.getLogger(__name__)


class PdfResource:
    """Renders, verifies and removes one PDF artifact per config.

    Parameters
    ----------
    strict_delete:
        Raise ``DeleteError`` when the file exists but cannot be removed.
        With ``False`` such failures are only logged.
    writer_factory:
        Builds the ``PdfWriter`` used by Create.
    """

    schema = RESOURCE_SCHEMA

    def __init__(
        self,
        *,
        strict_delete: bool = True,
        writer_factory: Callable[[], PdfWriter] = ReportlabWriter,
    ) -> None:
        self._strict_delete = strict_delete
        self._writer_factory = writer_factory

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, config: PdfArtifactConfig) -> ResourceResult:
        """Render the PDF, hash it, and return its identity.

        Raises
        ------
        RenderError
            If rendering or writing fails.
        ChecksumError
            If the written file cannot be read back.
        """
        path = render_pdf(config, self._writer_factory)
        try:
            identity = file_checksum(path)
        except OSError as exc:
            raise ChecksumError(f"Failed to read back {path}: {exc}") from exc

        logger.debug("created a pdf resource: %s (%s)", path, identity)
        return ResourceResult(filename=path, identity=identity)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def read(self, config: PdfArtifactConfig, identity: str) -> ResourceResult:
        """Verify the file still matches *identity*.

        A missing file, or one whose checksum differs, is reported as
        absent so the caller recreates it.

        Raises
        ------
        ChecksumError
            If the file exists but cannot be read.
        """
        path = config.filename
        try:
            current = file_checksum(path)
        except FileNotFoundError:
            logger.info("PDF %s no longer exists; marking absent.", path)
            return ResourceResult.absent(path)
        except OSError as exc:
            raise ChecksumError(f"Failed to read {path}: {exc}") from exc

        if current != identity:
            logger.info(
                "PDF %s was modified externally (%s != %s); marking absent.",
                path, current, identity,
            )
            return ResourceResult.absent(path)

        return ResourceResult(filename=path, identity=identity)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete(self, config: PdfArtifactConfig) -> ResourceResult:
        """Remove the file. Deleting an already-missing file is a no-op.

        Raises
        ------
        DeleteError
            If the file exists but cannot be removed and ``strict_delete``
            is enabled.
        """
        path = config.filename
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("PDF %s already gone.", path)
        except OSError as exc:
            if self._strict_delete:
                raise DeleteError(f"Failed to delete {path}: {exc}") from exc
            logger.warning("Ignoring failure to delete %s: %s", path, exc)
        else:
            logger.debug("Deleted PDF %s", path)
        return ResourceResult.absent(path)
