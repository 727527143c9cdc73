"""Unit tests for the document tree and resume records."""

import pytest

from vitae.contexts.layout.document import (
    HELVETICA,
    Break,
    Grid,
    Image,
    Margins,
    PageSettings,
    Style,
    padded,
    paragraph,
    span,
    stack,
    to_plaintext,
)
from vitae.contexts.layout.records import Degree, Project, Skill, WorkExperience


@pytest.mark.unit
def test_style_merge_child_fields_win():
    parent = Style(font_size=9, color=(1, 2, 3), bold=False, line_spacing=1.2)
    child = Style(bold=True, font_size=12)

    merged = parent.merge(child)

    assert merged == Style(font_size=12, color=(1, 2, 3), bold=True, italic=None, line_spacing=1.2)


@pytest.mark.unit
def test_style_merge_with_none_is_identity():
    style = Style(font_size=9)
    assert style.merge(None) is style


@pytest.mark.unit
def test_margins_helpers():
    assert Margins.trbl(1, 2, 3, 4) == Margins(top=1, right=2, bottom=3, left=4)
    assert Margins.all(5).horizontal == 10


@pytest.mark.unit
def test_paragraph_helper_wraps_plain_strings():
    para = paragraph("plain ", span("bold", bold=True))

    assert para.text == "plain bold"
    assert para.spans[0].style == Style()
    assert para.spans[1].style.bold is True


@pytest.mark.unit
def test_grid_rejects_rows_wider_than_columns():
    with pytest.raises(ValueError):
        Grid(column_weights=(1, 1), rows=((paragraph("a"), paragraph("b"), paragraph("c")),))


@pytest.mark.unit
def test_grid_rejects_non_positive_weights():
    with pytest.raises(ValueError):
        Grid(column_weights=(1, 0), rows=())


@pytest.mark.unit
def test_to_plaintext_skips_images_and_breaks(tmp_path):
    tree = stack(
        paragraph("one"),
        Break(2),
        Image(path=tmp_path / "rule.png"),
        padded(paragraph("two"), Margins.all(1)),
    )

    assert to_plaintext(tree) == ["one", "two"]


@pytest.mark.unit
def test_to_plaintext_rejects_unknown_nodes():
    with pytest.raises(TypeError):
        to_plaintext("not a block")


@pytest.mark.unit
def test_page_settings_base_style_is_complete():
    page = PageSettings(title="T", font_size=9, line_spacing=1.2, fonts=HELVETICA)

    base = page.base_style

    assert None not in (base.font_size, base.color, base.bold, base.italic, base.line_spacing)
    assert base.font_size == 9


@pytest.mark.unit
def test_font_family_faces():
    assert HELVETICA.face() == "Helvetica"
    assert HELVETICA.face(bold=True) == "Helvetica-Bold"
    assert HELVETICA.face(italic=True) == "Helvetica-Oblique"
    assert HELVETICA.face(bold=True, italic=True) == "Helvetica-BoldOblique"


@pytest.mark.unit
def test_skill_requires_category():
    with pytest.raises(ValueError):
        Skill("  ", ("Python",))


@pytest.mark.unit
def test_skill_items_must_be_a_list():
    with pytest.raises(TypeError):
        Skill("Languages", "Python")


@pytest.mark.unit
def test_records_coerce_lists_to_tuples():
    job = WorkExperience("Engineer", "Acme", "Remote", "2020", "2021", ["a", "b"])

    assert job.highlights == ("a", "b")
    assert hash(job) == hash(WorkExperience("Engineer", "Acme", "Remote", "2020", "2021", ("a", "b")))


@pytest.mark.unit
def test_records_coerce_numeric_text_fields():
    project = Project(title="Engine", organization="Personal", year=1843)

    assert project.year == "1843"
    assert project.nickname is None
    assert Skill(2020).category == "2020"


@pytest.mark.unit
def test_records_reject_non_text_fields():
    with pytest.raises(TypeError):
        Degree(university=["State"], location="x", degree="BSc", year="2019")
