"""Cursor-based PDF writer over a reportlab canvas.

Defines the ``PdfWriter`` Protocol the renderer drives, and
``ReportlabWriter``, the default implementation. The writer keeps a text
cursor measured in millimetres from the top-left corner of the page, while
reportlab draws in points from the bottom-left; conversion happens here.

Output is byte-deterministic: the canvas is created in invariant mode so no
timestamps or random document IDs are embedded.
"""

from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import Protocol, runtime_checkable

from reportlab.lib.pagesizes import LETTER
from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas

logger = logging.getLogger(__name__)

# Default page margin on every side, in millimetres.
DEFAULT_MARGIN = 10.0

# Base-14 font names keyed by (family, style). "Arial" is an alias of
# Helvetica, which is what it maps to in the standard PDF fonts.
_BASE_FONTS: dict[tuple[str, str], str] = {
    ("helvetica", ""): "Helvetica",
    ("helvetica", "B"): "Helvetica-Bold",
    ("helvetica", "I"): "Helvetica-Oblique",
    ("helvetica", "BI"): "Helvetica-BoldOblique",
    ("times", ""): "Times-Roman",
    ("times", "B"): "Times-Bold",
    ("times", "I"): "Times-Italic",
    ("times", "BI"): "Times-BoldItalic",
    ("courier", ""): "Courier",
    ("courier", "B"): "Courier-Bold",
    ("courier", "I"): "Courier-Oblique",
    ("courier", "BI"): "Courier-BoldOblique",
}
_FAMILY_ALIASES = {"arial": "helvetica"}


def resolve_font(family: str, style: str = "") -> str:
    """Map a family/style pair such as ``("Arial", "B")`` to a base font name.

    Raises
    ------
    ValueError
        If the family or style is not one of the standard PDF fonts.
    """
    key_family = family.lower()
    key_family = _FAMILY_ALIASES.get(key_family, key_family)
    key_style = "".join(sorted(style.upper(), key="BI".index)) if style else ""
    try:
        return _BASE_FONTS[(key_family, key_style)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported font: family={family!r} style={style!r}") from None


# Tabs have no glyph in the base-14 fonts
TAB_SPACES = 4

_TOKEN_RE = re.compile(r"\S+|\s+")


def _fit(token: str, font_name: str, font_size: float, max_width: float) -> int:
    """Length of the longest prefix of *token* that fits, at least one char."""
    cut = 1
    while cut < len(token) and stringWidth(token[: cut + 1], font_name, font_size) <= max_width:
        cut += 1
    return cut


def wrap_text(text: str, font_name: str, font_size: float, max_width: float) -> list[str]:
    """Wrap one paragraph into lines no wider than *max_width* points.

    Breaks at whitespace where possible and keeps runs of spaces as
    written. A word wider than the line is split at the last character
    that fits. Always returns at least one (possibly empty) line.
    """
    def width(s: str) -> float:
        return stringWidth(s, font_name, font_size)

    lines: list[str] = []
    current = ""
    for token in _TOKEN_RE.findall(text.replace("\t", " " * TAB_SPACES)):
        if width(current + token) <= max_width:
            current += token
            continue
        if token.isspace():
            lines.append(current.rstrip())
            current = ""
            continue
        if current.strip():
            lines.append(current.rstrip())
        current = ""
        while width(token) > max_width:
            cut = _fit(token, font_name, font_size, max_width)
            lines.append(token[:cut])
            token = token[cut:]
        current = token
    if current or not lines:
        lines.append(current)
    return lines


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class PdfWriter(Protocol):
    """The PDF-generation capability the renderer depends on.

    All lengths are millimetres.
    """

    @property
    def page_width(self) -> float: ...

    def add_page(self) -> None: ...

    def set_title(self, title: str) -> None: ...

    def set_font(self, family: str, style: str, size: float) -> None: ...

    def get_string_width(self, text: str) -> float: ...

    def set_x(self, x: float) -> None: ...

    def cell_format(
        self, width: float, height: float, text: str, *, ln: int = 0, align: str = "L"
    ) -> None: ...

    def ln(self, height: float) -> None: ...

    def set_auto_page_break(self, auto: bool, margin: float = 0.0) -> None: ...

    def write(self, height: float, text: str) -> None: ...

    def output_file_and_close(self, filename: Path) -> None: ...


# ---------------------------------------------------------------------------
# reportlab implementation
# ---------------------------------------------------------------------------


class ReportlabWriter:
    """``PdfWriter`` backed by ``reportlab.pdfgen.canvas.Canvas``.

    The document is rendered into memory and only written to disk by
    ``output_file_and_close``.

    Parameters
    ----------
    pagesize:
        ``(width, height)`` in points. Defaults to US Letter portrait.
    margin:
        Left, top and right margin in millimetres.
    """

    def __init__(
        self,
        pagesize: tuple[float, float] = LETTER,
        *,
        margin: float = DEFAULT_MARGIN,
    ) -> None:
        self._buffer = io.BytesIO()
        self._canvas = Canvas(self._buffer, pagesize=pagesize, invariant=1)
        self._width = pagesize[0] / mm
        self._height = pagesize[1] / mm
        self._margin = margin
        self._x = margin
        self._y = margin
        self._font_name: str | None = None
        self._font_size = 0.0  # points
        self._auto_page_break = False
        self._break_margin = 0.0
        self._page_count = 0
        self._closed = False

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def page_width(self) -> float:
        return self._width

    @property
    def page_height(self) -> float:
        return self._height

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def _baseline(self, top: float, height: float) -> float:
        """Reportlab y (points) of the baseline for text vertically centred in a row."""
        baseline_from_top = top * mm + (height * mm) / 2 + 0.3 * self._font_size
        return self._height * mm - baseline_from_top

    def _require_page(self) -> None:
        if self._page_count == 0:
            raise RuntimeError("add_page() must be called before drawing")
        if self._font_name is None:
            raise RuntimeError("set_font() must be called before drawing text")

    # ------------------------------------------------------------------
    # Document operations
    # ------------------------------------------------------------------

    def add_page(self) -> None:
        """Start a new page and move the cursor to the top-left margin."""
        if self._page_count > 0:
            self._canvas.showPage()
            # reportlab resets graphics state on a new page
            if self._font_name is not None:
                self._canvas.setFont(self._font_name, self._font_size)
        self._page_count += 1
        self._x = self._margin
        self._y = self._margin

    def set_title(self, title: str) -> None:
        self._canvas.setTitle(title)

    def set_font(self, family: str, style: str, size: float) -> None:
        self._font_name = resolve_font(family, style)
        self._font_size = float(size)
        self._canvas.setFont(self._font_name, self._font_size)

    def get_string_width(self, text: str) -> float:
        """Width of *text* in the current font, in millimetres."""
        if self._font_name is None:
            raise RuntimeError("set_font() must be called before measuring text")
        return stringWidth(text, self._font_name, self._font_size) / mm

    def set_x(self, x: float) -> None:
        self._x = x

    def cell_format(
        self, width: float, height: float, text: str, *, ln: int = 0, align: str = "L"
    ) -> None:
        """Draw *text* in a cell of the given size at the cursor.

        ``align`` is ``"L"``, ``"C"`` or ``"R"``. With ``ln=1`` the cursor
        moves to the start of the next line, otherwise to the right of the cell.
        """
        self._require_page()
        baseline = self._baseline(self._y, height)
        left = self._x * mm
        if align == "C":
            self._canvas.drawCentredString(left + (width * mm) / 2, baseline, text)
        elif align == "R":
            self._canvas.drawRightString(left + width * mm, baseline, text)
        else:
            self._canvas.drawString(left, baseline, text)

        if ln == 1:
            self._x = self._margin
            self._y += height
        else:
            self._x += width

    def ln(self, height: float) -> None:
        """Move the cursor to the left margin, *height* mm further down."""
        self._x = self._margin
        self._y += height

    def set_auto_page_break(self, auto: bool, margin: float = 0.0) -> None:
        self._auto_page_break = auto
        self._break_margin = margin

    def write(self, height: float, text: str) -> None:
        """Write flowing text with line height *height*.

        Words wrap at the right margin, a word longer than a line is split
        mid-word, and embedded newlines start a new line. Tabs expand to
        spaces and runs of spaces are kept. With auto page break enabled a
        line that would cross the bottom break margin starts a new page first.
        """
        self._require_page()
        max_width = (self._width - 2 * self._margin) * mm
        for paragraph in text.split("\n"):
            lines = wrap_text(paragraph, self._font_name, self._font_size, max_width)
            for line in lines:
                if self._auto_page_break and self._y + height > self._height - self._break_margin:
                    self.add_page()
                if line:
                    self._canvas.drawString(
                        self._margin * mm, self._baseline(self._y, height), line
                    )
                self.ln(height)

    def output_file_and_close(self, filename: Path) -> None:
        """Finish the document and write it to *filename*.

        A file left half-written by a failed write is removed before the
        error propagates.
        """
        if self._closed:
            raise RuntimeError("document already closed")
        self._canvas.save()
        self._closed = True
        path = Path(filename)
        try:
            path.write_bytes(self._buffer.getvalue())
        except OSError:
            if path.is_file():
                path.unlink()
            raise
        logger.debug(
            "Wrote %d page(s), %d bytes to %s",
            self._page_count, self._buffer.getbuffer().nbytes, path,
        )
