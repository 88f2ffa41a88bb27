"""Adversarial tests — files changed behind the resource's back.

Read must report absence (never an error) when the rendered file was
deleted, truncated, appended to, or swapped for another valid PDF.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pdfartifact.core.resource import PdfResource
from pdfartifact.core.renderer import render_pdf
from pdfartifact.models.artifacts import PdfArtifactConfig


class TestOutOfBandChanges:
    @pytest.fixture
    def created(self, resource: PdfResource, pdf_config: PdfArtifactConfig) -> str:
        return resource.create(pdf_config).identity

    def test_appended_byte(self, resource, pdf_config, created):
        with pdf_config.filename.open("ab") as fh:
            fh.write(b"\x00")
        assert resource.read(pdf_config, created).identity == ""

    def test_truncated(self, resource, pdf_config, created):
        data = pdf_config.filename.read_bytes()
        pdf_config.filename.write_bytes(data[: len(data) // 2])
        assert not resource.read(pdf_config, created).present

    def test_emptied(self, resource, pdf_config, created):
        pdf_config.filename.write_bytes(b"")
        assert not resource.read(pdf_config, created).present

    def test_single_byte_flipped(self, resource, pdf_config, created):
        data = bytearray(pdf_config.filename.read_bytes())
        data[len(data) // 2] ^= 0xFF
        pdf_config.filename.write_bytes(bytes(data))
        assert not resource.read(pdf_config, created).present

    def test_swapped_for_other_pdf(self, resource, pdf_config, created, tmp_path: Path):
        other = PdfArtifactConfig(
            header="Forged", content="Different body", filename=tmp_path / "other.pdf"
        )
        render_pdf(other)
        pdf_config.filename.write_bytes(other.filename.read_bytes())
        assert not resource.read(pdf_config, created).present

    def test_deleted(self, resource, pdf_config, created):
        pdf_config.filename.unlink()
        assert not resource.read(pdf_config, created).present

    def test_restored_bytes_are_present_again(self, resource, pdf_config, created):
        original = pdf_config.filename.read_bytes()
        pdf_config.filename.write_bytes(original + b"tamper")
        assert not resource.read(pdf_config, created).present
        pdf_config.filename.write_bytes(original)
        assert resource.read(pdf_config, created).identity == created

    def test_forged_identity_does_not_match(self, resource, pdf_config, created):
        assert not resource.read(pdf_config, "0" * 40).present
