"""Render a header/content pair into a single PDF file.

Layout: US Letter portrait; the header is a bold title centred on the page,
followed by a fixed gap and the body text flowing across as many pages as
it needs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from pdfartifact.core.pdf_writer import PdfWriter, ReportlabWriter
from pdfartifact.errors import RenderError
from pdfartifact.models.artifacts import PdfArtifactConfig

logger = logging.getLogger(__name__)

# Title: family, style, size (pt); cell padding and height in mm
TITLE_FONT = ("Arial", "B", 16)
TITLE_PADDING = 6.0
TITLE_CELL_HEIGHT = 9.0
TITLE_GAP = 10.0

# Body: family, style, size (pt); line height and page break margin in mm
BODY_FONT = ("Arial", "", 11)
BODY_LINE_HEIGHT = 8.0
PAGE_BREAK_MARGIN = 2.0


def render_pdf(
    config: PdfArtifactConfig,
    writer_factory: Callable[[], PdfWriter] = ReportlabWriter,
) -> Path:
    """Render *config* and write the PDF to ``config.filename``.

    Returns the path written. Any failure is raised as ``RenderError``; no
    file is left behind by a failed write.
    """
    header = config.header
    try:
        pdf = writer_factory()
        pdf.add_page()
        pdf.set_title(header)
        pdf.set_font(*TITLE_FONT)

        width = pdf.get_string_width(header) + TITLE_PADDING
        pdf.set_x((pdf.page_width - width) / 2)
        pdf.cell_format(width, TITLE_CELL_HEIGHT, header, ln=1, align="C")
        pdf.ln(TITLE_GAP)

        pdf.set_font(*BODY_FONT)
        pdf.set_auto_page_break(True, PAGE_BREAK_MARGIN)
        pdf.write(BODY_LINE_HEIGHT, config.content)

        pdf.output_file_and_close(config.filename)
    except Exception as exc:
        raise RenderError(f"Failed to render PDF to {config.filename}: {exc}") from exc

    logger.debug("Rendered %r to %s", header, config.filename)
    return config.filename
