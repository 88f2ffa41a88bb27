"""Shared test fixtures for pdfartifact."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from pdfartifact.core.reconciler import Reconciler
from pdfartifact.core.resource import PdfResource
from pdfartifact.core.state_store import StateStore
from pdfartifact.models.artifacts import PdfArtifactConfig


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for rendered PDFs."""
    return tmp_path


@pytest.fixture
def make_config(tmp_dir: Path) -> Callable[..., PdfArtifactConfig]:
    """Factory fixture: build a PdfArtifactConfig with sensible defaults."""

    def _factory(**overrides: Any) -> PdfArtifactConfig:
        defaults: dict[str, Any] = {
            "header": "Title",
            "content": "Body text",
            "filename": tmp_dir / "x.pdf",
        }
        defaults.update(overrides)
        return PdfArtifactConfig(**defaults)

    return _factory


@pytest.fixture
def pdf_config(make_config: Callable[..., PdfArtifactConfig]) -> PdfArtifactConfig:
    """Convenience: the Title / Body text config rendered to x.pdf."""
    return make_config()


@pytest.fixture
def resource() -> PdfResource:
    """Provide a PdfResource with strict delete."""
    return PdfResource()


@pytest.fixture
def state_store(tmp_dir: Path) -> StateStore:
    """Provide a fresh StateStore in a temp directory."""
    return StateStore(tmp_dir / "state" / "state.json")


@pytest.fixture
def reconciler(resource: PdfResource, state_store: StateStore) -> Reconciler:
    """Provide a Reconciler wired to the test resource and store."""
    return Reconciler(resource, state_store)
