"""
Integration tests for the rendering context - renders real PDFs with reportlab.
"""

import shutil

import pdfplumber
import pytest

from vitae.contexts.composing import build_cover_letter, build_resume
from vitae.contexts.layout.document import (
    Document,
    Image,
    Margins,
    PageSettings,
    padded,
    paragraph,
    stack,
)
from vitae.contexts.rendering import build_pdf, render
from vitae.contexts.rendering.renderer import register_fonts
from vitae.exceptions import RenderError
from vitae.utils.pdf_processing import page_count

GHOSTSCRIPT_AVAILABLE = shutil.which("gs") is not None
skip_if_no_ghostscript = pytest.mark.skipif(
    not GHOSTSCRIPT_AVAILABLE,
    reason="gs not installed - install Ghostscript",
)


def _pdf_text(path):
    with pdfplumber.open(path) as pdf:
        return "\n".join(page.extract_text() or "" for page in pdf.pages)


@pytest.mark.integration
def test_render_resume_to_temporary_pdf(tmp_path, fonts, small_resume):
    document = build_resume("Ada Lovelace", "Engineer", content=small_resume, fonts=fonts)

    temp_path = render(document, directory=tmp_path)

    assert temp_path.exists()
    assert temp_path.suffix == ".pdf"
    text = _pdf_text(temp_path)
    assert "ADA LOVELACE" in text
    assert "Engineer, Acme" in text
    assert "Did X" in text
    assert "Did Y" in text
    assert "Python, Rust" in text


@pytest.mark.integration
def test_render_cover_letter(tmp_path, fonts):
    document = build_cover_letter("Ada Lovelace", "Acme", position="Engineer", fonts=fonts)

    temp_path = render(document, directory=tmp_path)

    text = " ".join(_pdf_text(temp_path).split())
    assert "the Engineer opportunity to work at Acme" in text
    assert "FROM THE DESK OF" in text


@pytest.mark.integration
def test_render_failure_leaves_no_temporary_file(tmp_path, fonts):
    """An image taller than the page cannot be laid out."""
    rule = build_resume("Ada", "Engineer", fonts=fonts).blocks[1]
    document = Document(
        page=PageSettings(title="Broken", fonts=fonts),
        blocks=(Image(path=rule.path, scale=(1.0, 2000.0)),),
    )
    render_dir = tmp_path / "render"
    render_dir.mkdir()

    with pytest.raises(RenderError):
        render(document, directory=render_dir)

    assert list(render_dir.iterdir()) == []


@pytest.mark.integration
def test_render_unknown_paper_size(tmp_path, fonts):
    document = Document(page=PageSettings(title="Odd", paper_size="tabloid-ish", fonts=fonts), blocks=())

    with pytest.raises(RenderError):
        render(document, directory=tmp_path)


@pytest.mark.integration
def test_padded_content_flows_onto_more_pages(tmp_path, fonts):
    lines = [paragraph(f"Line {i} of a long letter body") for i in range(200)]
    document = Document(
        page=PageSettings(title="Long", fonts=fonts),
        blocks=(padded(stack(*lines), Margins.trbl(0, 30, 0, 30)),),
    )

    result = build_pdf(document, tmp_path / "long", shrink=False)

    assert result.page_count is not None and result.page_count >= 2
    text = _pdf_text(result.output_path)
    assert "Line 0 of" in text
    assert "Line 199 of" in text


@pytest.mark.integration
def test_build_pdf_without_shrink(tmp_path, fonts, small_resume):
    document = build_resume("Ada Lovelace", "Engineer", content=small_resume, fonts=fonts)

    result = build_pdf(document, tmp_path / "out" / "resume", shrink=False)

    assert result.success
    assert result.output_path == tmp_path / "out" / "resume.pdf"
    assert result.output_path.exists()
    assert result.page_count == 1
    assert result.postprocess is None
    assert not result.shrunk


@pytest.mark.integration
def test_build_pdf_default_resume_fits_letter_pages(tmp_path, fonts):
    document = build_resume("Ada Lovelace", "Machine Learning Engineer", fonts=fonts)

    result = build_pdf(document, tmp_path / "resume.pdf", shrink=False)

    assert result.page_count is not None and result.page_count >= 1
    text = _pdf_text(result.output_path)
    assert "SLEAPyFaces" in text
    assert "Hampshire College" in text


@pytest.mark.integration
def test_register_fonts_rejects_unreadable_ttf(tmp_path):
    from vitae.contexts.composing import font_family

    for name in ("Rubik-Regular.ttf", "Rubik-Bold.ttf", "Rubik-Italic.ttf", "Rubik-BoldItalic.ttf"):
        (tmp_path / name).write_bytes(b"not a font")

    with pytest.raises(RenderError):
        register_fonts(font_family(tmp_path))


@pytest.mark.integration
@skip_if_no_ghostscript
def test_build_pdf_with_ghostscript(tmp_path, fonts):
    document = build_cover_letter("Ada Lovelace", "Acme", position="Engineer", fonts=fonts)

    result = build_pdf(document, tmp_path / "letter", shrink=True)

    assert result.success
    assert result.shrunk
    assert result.postprocess.returncode == 0
    assert page_count(result.output_path) >= 1
