"""Unit tests for layout primitives."""

import math

import pytest

from vitae.contexts.layout.document import (
    BulletList,
    Grid,
    Padded,
    Paragraph,
    Stack,
    to_plaintext,
)
from vitae.contexts.layout.primitives import (
    chunked,
    education_block,
    employment_block,
    project_cell,
    projects_grid,
    section_title,
    skill_line,
    skills_block,
)
from vitae.contexts.layout.records import Degree, Project, Skill
from vitae.contexts.layout.styles import ACCENT_COLOR, SECTION_MARGINS


def _projects(n):
    return [Project(title=f"Project {i}", organization="Org", year="2020") for i in range(n)]


def _grid(block):
    assert isinstance(block, Padded)
    assert isinstance(block.child, Grid)
    return block.child


@pytest.mark.unit
def test_chunked_groups_in_order():
    assert list(chunked([1, 2, 3, 4, 5, 6, 7], 3)) == [(1, 2, 3), (4, 5, 6), (7,)]


@pytest.mark.unit
def test_chunked_empty_input():
    assert list(chunked([], 3)) == []


@pytest.mark.unit
def test_chunked_rejects_non_positive_size():
    with pytest.raises(ValueError):
        list(chunked([1], 0))


@pytest.mark.unit
def test_section_title_is_uppercased_bold_and_padded():
    block = section_title("Machine Learning Engineer")

    assert isinstance(block, Padded)
    assert block.margins == SECTION_MARGINS
    heading = block.child.children[0]
    assert heading.text == "MACHINE LEARNING ENGINEER"
    assert heading.style.bold is True
    assert heading.style.color == ACCENT_COLOR


@pytest.mark.unit
@pytest.mark.parametrize(
    "skill",
    [
        Skill("Languages", ("C/C++", "Python", "R")),
        Skill("Leadership", ("Creative",)),
        Skill("Tools", ("git", "make", "Docker", "Kubernetes", "CUDA")),
    ],
)
def test_skill_line_joins_items_in_order(skill):
    line = skill_line(skill)

    assert line.text == f"{skill.category}: " + ", ".join(skill.items)
    assert line.spans[0].text == f"{skill.category}: "
    assert line.spans[0].style.bold is True
    assert not line.text.endswith((",", ", ", "."))


@pytest.mark.unit
def test_skill_line_with_no_items_keeps_label():
    assert skill_line(Skill("Languages")).text == "Languages: "


@pytest.mark.unit
def test_skills_block_has_one_line_per_skill():
    skills = [Skill("A", ("1",)), Skill("B", ("2", "3"))]

    assert to_plaintext(skills_block(skills)) == ["A: 1", "B: 2, 3"]


@pytest.mark.unit
def test_employment_block_header_and_bullets(acme_job):
    """A job renders its header line followed by one bullet per highlight."""
    lines = to_plaintext(employment_block([acme_job]))

    assert lines == [
        "Engineer, Acme; Remote — Jan 2020 - Present",
        "• Did X",
        "• Did Y",
    ]


@pytest.mark.unit
def test_employment_block_structure(acme_job):
    stack = employment_block([acme_job, acme_job]).child

    assert isinstance(stack, Stack)
    kinds = [type(child) for child in stack.children]
    assert kinds == [Paragraph, BulletList, Paragraph, BulletList]
    header = stack.children[0]
    assert header.spans[0].text == "Engineer, Acme"
    assert header.spans[0].style.bold is True


@pytest.mark.unit
def test_education_block_header_and_description():
    deg = Degree(
        university="Hampshire College",
        location="Amherst, MA",
        degree="Bachelors of the Arts",
        year="2022",
        description="Thesis on neuroscience",
    )

    assert to_plaintext(education_block([deg])) == [
        "Hampshire College, Bachelors of the Arts — Amherst, MA, 2022",
        "Thesis on neuroscience",
    ]


@pytest.mark.unit
def test_project_cell_with_nickname():
    cell = project_cell(Project(title="Trash Wi-Fi", organization="IowaBIG", year="2016", nickname="Poo"))
    lines = to_plaintext(cell)

    assert lines == ["Poo - Trash Wi-Fi", "IowaBIG - 2016"]
    title = cell.child.children[0]
    assert title.spans[0].style.italic is True
    assert title.spans[1].style.italic is None


@pytest.mark.unit
def test_project_cell_without_nickname():
    cell = project_cell(Project(title="Lexicase", organization="Hampshire", year="2019"))

    assert to_plaintext(cell) == ["Lexicase", "Hampshire - 2019"]


@pytest.mark.unit
@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5, 6, 7, 9, 10])
def test_projects_grid_row_count_and_order(n):
    """n projects fill ceil(n/3) rows of at most three cells, in input order."""
    projects = _projects(n)
    grid = _grid(projects_grid(projects))

    assert grid.column_weights == (1, 1, 1)
    assert len(grid.rows) == math.ceil(n / 3)
    assert all(1 <= len(row) <= 3 for row in grid.rows)

    titles = [line for line in to_plaintext(grid) if line.startswith("Project ")]
    assert titles == [p.title for p in projects]


@pytest.mark.unit
def test_projects_grid_last_row_is_short_not_padded():
    grid = _grid(projects_grid(_projects(5)))

    assert [len(row) for row in grid.rows] == [3, 2]
