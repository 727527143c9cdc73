"""Unit tests for the résumé and cover-letter builders."""

from datetime import date

import pytest

from vitae.contexts.composing import (
    DEFAULT_CONTACT,
    DEFAULT_RESUME,
    build_cover_letter,
    build_resume,
    font_family,
    format_letter_date,
    rule_image_path,
)
from vitae.contexts.layout.document import HELVETICA, Image, Paragraph, to_plaintext
from vitae.exceptions import AssetNotFoundError


def _text(document):
    return "\n".join(to_plaintext(document))


@pytest.mark.unit
def test_cover_letter_mentions_position_and_company(fonts):
    document = build_cover_letter("Ada Lovelace", "Acme", position="Engineer", fonts=fonts)

    assert "the Engineer opportunity to work at Acme" in _text(document)


@pytest.mark.unit
def test_cover_letter_sequence(fonts):
    document = build_cover_letter(
        "Ada Lovelace",
        "Acme",
        location="Remote",
        position="Engineer",
        today=date(2026, 3, 7),
        contact="ada@example.com",
        fonts=fonts,
    )
    lines = to_plaintext(document)

    assert lines[:2] == ["FROM THE DESK OF", "ADA LOVELACE"]
    assert lines[2:6] == ["March 7, 2026", "Acme", "Remote", "Dear Acme,"]
    assert "Acme’s reputation for innovation" in lines[8]
    assert lines[-5:] == [
        "Thank you for considering my application.",
        "Warm regards,",
        "Ada Lovelace",
        "CONTACT",
        "ada@example.com",
    ]


@pytest.mark.unit
def test_cover_letter_missing_optionals_keep_block_order(fonts):
    """Absent location and position are substituted, never dropped."""
    full = build_cover_letter("Ada", "Acme", location="Remote", position="Engineer", fonts=fonts)
    bare = build_cover_letter("Ada", "Acme", fonts=fonts)

    assert [type(b) for b in bare.blocks] == [type(b) for b in full.blocks]
    lines = to_plaintext(bare)
    assert lines[4] == ""
    assert "the advertised opportunity to work at Acme" in _text(bare)
    assert lines[-1] == DEFAULT_CONTACT


@pytest.mark.unit
def test_cover_letter_page_settings(fonts):
    page = build_cover_letter("Ada", "Acme", fonts=fonts).page

    assert page.title == "Cover Letter"
    assert page.paper_size == "letter"
    assert page.font_size == 10
    assert page.line_spacing == 1.3
    assert page.author == "Ada"


@pytest.mark.unit
def test_cover_letter_has_header_and_footer_rules(fonts):
    images = [b for b in build_cover_letter("Ada", "Acme", fonts=fonts).blocks if isinstance(b, Image)]

    assert [image.scale for image in images] == [(1.0, 1.0), (2.0, 0.5)]


@pytest.mark.unit
@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2026, 10, 19), "October 19, 2026"),
        (date(2024, 2, 1), "February 1, 2024"),
    ],
)
def test_format_letter_date(day, expected):
    assert format_letter_date(day) == expected


@pytest.mark.unit
def test_resume_with_one_job(fonts, acme_job, small_resume):
    document = build_resume("Ada Lovelace", "Engineer", content=small_resume, fonts=fonts)
    lines = to_plaintext(document)

    header = lines.index("Engineer, Acme; Remote — Jan 2020 - Present")
    assert lines[header + 1 : header + 3] == ["• Did X", "• Did Y"]


@pytest.mark.unit
def test_resume_section_order(fonts, small_resume):
    lines = to_plaintext(build_resume("Ada Lovelace", "Engineer", content=small_resume, fonts=fonts))

    assert lines[0] == "ADA LOVELACE"
    assert lines[1] == "ENGINEER"
    assert lines[2] == "Builds reliable software."
    headings = [line for line in lines if line in ("SKILLS", "EXPERIENCE", "EDUCATION", "PROJECTS")]
    assert headings == ["SKILLS", "EXPERIENCE", "EDUCATION", "PROJECTS"]
    assert lines[-1] == DEFAULT_CONTACT


@pytest.mark.unit
def test_resume_summary_bold_markup(fonts, small_resume):
    document = build_resume("Ada", "Engineer", content=small_resume, fonts=fonts)
    summary = document.blocks[4].child.children[0]

    assert isinstance(summary, Paragraph)
    assert [(s.text, s.style.bold) for s in summary.spans] == [
        ("Builds ", None),
        ("reliable", True),
        (" software.", None),
    ]


@pytest.mark.unit
def test_resume_defaults(fonts):
    document = build_resume("Ada", "ML Engineer", contact="ada@example.com", fonts=fonts)
    text = _text(document)

    assert document.page.title == "Resume"
    assert document.page.font_size == 9
    assert document.page.line_spacing == 1.2
    for job in DEFAULT_RESUME.employment:
        assert f"{job.position}, {job.company}" in text
    assert "SLEAPyFaces - " in text
    assert text.endswith("ada@example.com")


@pytest.mark.unit
def test_resume_rule_image_scale(fonts):
    images = [b for b in build_resume("Ada", "Engineer", fonts=fonts).blocks if isinstance(b, Image)]

    assert [image.scale for image in images] == [(4.0, 1.0)]


@pytest.mark.unit
def test_font_family_falls_back_to_helvetica(tmp_path):
    assert font_family(tmp_path) == HELVETICA


@pytest.mark.unit
def test_font_family_uses_rubik_when_present(tmp_path):
    for file_name in ("Rubik-Regular.ttf", "Rubik-Bold.ttf", "Rubik-Italic.ttf", "Rubik-BoldItalic.ttf"):
        (tmp_path / file_name).write_bytes(b"")

    family = font_family(tmp_path)

    assert family.name == "Rubik"
    assert family.face(bold=True) == "Rubik-Bold"
    assert family.files[0] == tmp_path / "Rubik-Regular.ttf"


@pytest.mark.unit
def test_rule_image_is_bundled():
    assert rule_image_path().is_file()


@pytest.mark.unit
def test_missing_rule_image_raises(tmp_path):
    with pytest.raises(AssetNotFoundError):
        rule_image_path(tmp_path / "missing.ppm")
