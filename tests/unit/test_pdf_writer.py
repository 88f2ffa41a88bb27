"""Tests for ReportlabWriter — cursor movement, fonts, page flow, output."""

from __future__ import annotations

from pathlib import Path

import pytest
from pypdf import PdfReader

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth

from pdfartifact.core.pdf_writer import PdfWriter, ReportlabWriter, resolve_font, wrap_text


class TestResolveFont:
    @pytest.mark.parametrize(
        "family,style,expected",
        [
            ("Arial", "B", "Helvetica-Bold"),
            ("Arial", "", "Helvetica"),
            ("helvetica", "I", "Helvetica-Oblique"),
            ("Times", "IB", "Times-BoldItalic"),
            ("Courier", "", "Courier"),
        ],
    )
    def test_known_fonts(self, family: str, style: str, expected: str):
        assert resolve_font(family, style) == expected

    @pytest.mark.parametrize("family,style", [("Comic Sans", ""), ("Arial", "U"), ("Arial", "BB")])
    def test_unknown_fonts(self, family: str, style: str):
        with pytest.raises(ValueError, match="Unsupported font"):
            resolve_font(family, style)


class TestReportlabWriter:
    @pytest.fixture
    def writer(self) -> ReportlabWriter:
        pdf = ReportlabWriter()
        pdf.add_page()
        pdf.set_font("Arial", "", 11)
        return pdf

    def test_satisfies_protocol(self):
        assert isinstance(ReportlabWriter(), PdfWriter)

    def test_letter_page_size_in_mm(self):
        pdf = ReportlabWriter()
        assert pdf.page_width == pytest.approx(215.9, abs=0.01)
        assert pdf.page_height == pytest.approx(279.4, abs=0.01)

    def test_cursor_starts_at_margin(self, writer: ReportlabWriter):
        assert writer.x == 10.0
        assert writer.y == 10.0
        assert writer.page_count == 1

    def test_string_width_scales_with_text(self, writer: ReportlabWriter):
        short = writer.get_string_width("Title")
        longer = writer.get_string_width("Title Title")
        assert 0 < short < longer

    def test_string_width_requires_font(self):
        pdf = ReportlabWriter()
        with pytest.raises(RuntimeError, match="set_font"):
            pdf.get_string_width("Title")

    def test_drawing_requires_page(self):
        pdf = ReportlabWriter()
        pdf.set_font("Arial", "B", 16)
        with pytest.raises(RuntimeError, match="add_page"):
            pdf.cell_format(20, 9, "Title", ln=1, align="C")

    def test_cell_with_line_break(self, writer: ReportlabWriter):
        writer.set_x(50)
        writer.cell_format(30, 9, "Title", ln=1, align="C")
        assert writer.x == 10.0
        assert writer.y == 19.0

    def test_cell_without_line_break(self, writer: ReportlabWriter):
        writer.set_x(50)
        writer.cell_format(30, 9, "Title")
        assert writer.x == 80
        assert writer.y == 10.0

    def test_ln(self, writer: ReportlabWriter):
        writer.set_x(42)
        writer.ln(10)
        assert writer.x == 10.0
        assert writer.y == 20.0

    def test_write_advances_one_line_per_row(self, writer: ReportlabWriter):
        writer.write(8, "one\ntwo\nthree")
        assert writer.y == 10.0 + 3 * 8

    def test_write_wraps_long_lines(self, writer: ReportlabWriter):
        writer.write(8, "word " * 200)
        assert writer.y > 10.0 + 8

    def test_write_splits_unbroken_text(self, writer: ReportlabWriter):
        writer.write(8, "A" * 400)
        assert writer.y >= 10.0 + 5 * 8

    def test_auto_page_break(self, writer: ReportlabWriter):
        writer.set_auto_page_break(True, 2.0)
        writer.write(8, "\n".join(f"line {i}" for i in range(100)))
        assert writer.page_count >= 3

    def test_no_page_break_when_disabled(self, writer: ReportlabWriter):
        writer.set_auto_page_break(False)
        writer.write(8, "\n".join(f"line {i}" for i in range(100)))
        assert writer.page_count == 1

    def test_output_writes_pdf(self, writer: ReportlabWriter, tmp_path: Path):
        writer.set_title("Doc")
        writer.write(8, "hello writer")
        target = tmp_path / "out.pdf"
        writer.output_file_and_close(target)
        data = target.read_bytes()
        assert data.startswith(b"%PDF")
        reader = PdfReader(target)
        assert reader.metadata.title == "Doc"
        assert "hello writer" in reader.pages[0].extract_text()

    def test_output_twice_rejected(self, writer: ReportlabWriter, tmp_path: Path):
        writer.output_file_and_close(tmp_path / "a.pdf")
        with pytest.raises(RuntimeError, match="closed"):
            writer.output_file_and_close(tmp_path / "b.pdf")

    def test_output_to_missing_directory_leaves_nothing(
        self, writer: ReportlabWriter, tmp_path: Path
    ):
        target = tmp_path / "no-such-dir" / "out.pdf"
        with pytest.raises(FileNotFoundError):
            writer.output_file_and_close(target)
        assert not target.exists()


class TestWrapText:
    # Printable width of a Letter page with 10 mm margins, in points
    MAX_WIDTH = (215.9 - 2 * 10) * mm

    def _width(self, line: str) -> float:
        return stringWidth(line, "Helvetica", 11)

    def test_long_word_is_split_to_fit(self):
        lines = wrap_text("A" * 400, "Helvetica", 11, self.MAX_WIDTH)
        assert len(lines) > 1
        assert all(self._width(line) <= self.MAX_WIDTH for line in lines)
        assert "".join(lines) == "A" * 400

    def test_long_word_after_short_word_starts_new_line(self):
        lines = wrap_text("intro " + "B" * 300, "Helvetica", 11, self.MAX_WIDTH)
        assert lines[0] == "intro"
        assert all(self._width(line) <= self.MAX_WIDTH for line in lines)
        assert "".join(lines[1:]) == "B" * 300

    def test_sentences_wrap_at_spaces(self):
        text = " ".join(f"word{i}" for i in range(200))
        lines = wrap_text(text, "Helvetica", 11, self.MAX_WIDTH)
        assert len(lines) > 1
        assert all(self._width(line) <= self.MAX_WIDTH for line in lines)
        assert " ".join(lines).split() == text.split()

    def test_whitespace_runs_and_tabs_kept(self):
        lines = wrap_text("a     b\tc", "Helvetica", 11, self.MAX_WIDTH)
        assert lines == ["a     b    c"]

    def test_empty_text_is_one_empty_line(self):
        assert wrap_text("", "Helvetica", 11, self.MAX_WIDTH) == [""]
