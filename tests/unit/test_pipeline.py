"""Unit tests for the build pipeline, with rendering and Ghostscript faked out."""

import subprocess

import pytest

from vitae.contexts.layout.document import Document, PageSettings
from vitae.contexts.rendering import pipeline
from vitae.contexts.rendering.pipeline import build_pdf


@pytest.fixture
def fake_render(monkeypatch, tmp_path):
    """Replace reportlab rendering with a file written in a scratch directory."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()

    def render(document, directory=None):
        path = scratch / "vitae-render.pdf"
        path.write_bytes(b"%PDF-1.4\n")
        return path

    monkeypatch.setattr(pipeline, "render", render)
    return scratch


@pytest.fixture
def failing_ghostscript(monkeypatch):
    """Ghostscript that exits 1 without writing its output file."""

    def run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="Error: /undefined\n")

    monkeypatch.setattr(subprocess, "run", run)


def _document(fonts):
    return Document(page=PageSettings(title="Letter", fonts=fonts), blocks=())


@pytest.mark.unit
def test_failed_shrink_does_not_report_stale_output(fonts, fake_render, failing_ghostscript, tmp_path):
    """A PDF left by an earlier build is not mistaken for the new one."""
    output_path = tmp_path / "letter.pdf"
    output_path.write_bytes(b"OLD")

    result = build_pdf(_document(fonts), output_path, shrink=True)

    assert not result.success
    assert not output_path.exists()
    assert result.page_count is None
    assert result.postprocess.returncode == 1
    assert list(fake_render.iterdir()) == []


@pytest.mark.unit
def test_failed_shrink_without_previous_output(fonts, fake_render, failing_ghostscript, tmp_path):
    result = build_pdf(_document(fonts), tmp_path / "letter", shrink=True)

    assert not result.success
    assert result.output_path == tmp_path / "letter.pdf"
    assert list(fake_render.iterdir()) == []


@pytest.mark.unit
def test_no_shrink_replaces_previous_output(fonts, fake_render, tmp_path):
    output_path = tmp_path / "letter.pdf"
    output_path.write_bytes(b"OLD")

    result = build_pdf(_document(fonts), output_path, shrink=False)

    assert result.success
    assert output_path.read_bytes() == b"%PDF-1.4\n"
    assert result.postprocess is None
