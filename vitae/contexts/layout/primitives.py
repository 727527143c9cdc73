"""
Layout Primitives

Pure functions that turn typed résumé records into document fragments.
Each primitive returns a new block tree; nothing is shared between calls.
"""

from typing import Iterator, List, Sequence, Tuple, TypeVar

from vitae.contexts.layout.document import (
    Block,
    BulletList,
    Grid,
    Paragraph,
    Span,
    padded,
    paragraph,
    stack,
)
from vitae.contexts.layout.records import Degree, Project, Skill, WorkExperience
from vitae.contexts.layout.styles import (
    BODY_STYLE,
    BOLD,
    ENTRY_HEADER_STYLE,
    ITALIC,
    PROJECT_CELL_MARGINS,
    SECTION_MARGINS,
    SECTION_TITLE_STYLE,
)

T = TypeVar("T")

BULLET = "•"
SKILL_SEPARATOR = ", "
PROJECT_COLUMNS = 3


def chunked(items: Sequence[T], size: int) -> Iterator[Tuple[T, ...]]:
    """
    Yield consecutive groups of `size` items; the last group may be shorter.

    Example:
        >>> list(chunked([1, 2, 3, 4], 3))
        [(1, 2, 3), (4,)]
    """
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield tuple(items[start : start + size])


def section_title(label: str) -> Block:
    """Upper-cased, bold, accent-colored section heading."""
    return padded(
        stack(paragraph(label.upper(), style=SECTION_TITLE_STYLE)),
        SECTION_MARGINS,
    )


def skill_line(skill: Skill) -> Paragraph:
    """Bold category label followed by the items joined with ', '."""
    return paragraph(
        Span(f"{skill.category}: ", BOLD),
        SKILL_SEPARATOR.join(skill.items),
        style=BODY_STYLE,
    )


def skills_block(skills: Sequence[Skill]) -> Block:
    return padded(stack(*(skill_line(skill) for skill in skills)), SECTION_MARGINS)


def work_experience(job: WorkExperience) -> List[Block]:
    """
    Header line plus bulleted highlights for one job.

    Header: "{position}, {company}; {location} — {start_date} - {end_date}"
    with the position and company in bold.
    """
    header = paragraph(
        Span(f"{job.position}, {job.company}", BOLD),
        f"; {job.location} — {job.start_date} - {job.end_date}",
        style=ENTRY_HEADER_STYLE,
    )
    highlights = BulletList(
        items=tuple(paragraph(item) for item in job.highlights),
        bullet=BULLET,
        style=BODY_STYLE,
    )
    return [header, highlights]


def employment_block(jobs: Sequence[WorkExperience]) -> Block:
    blocks = []
    for job in jobs:
        blocks.extend(work_experience(job))
    return padded(stack(*blocks), SECTION_MARGINS)


def degree(deg: Degree) -> List[Block]:
    header = paragraph(
        Span(f"{deg.university}, {deg.degree}", BOLD),
        f" — {deg.location}, {deg.year}",
        style=ENTRY_HEADER_STYLE,
    )
    description = paragraph(deg.description, style=BODY_STYLE)
    return [header, description]


def education_block(degrees: Sequence[Degree]) -> Block:
    blocks = []
    for deg in degrees:
        blocks.extend(degree(deg))
    return padded(stack(*blocks), SECTION_MARGINS)


def project_cell(proj: Project) -> Block:
    """
    Grid cell for one project.

    First line: optional italic "{nickname} - " then the title.
    Second line: "{organization} - {year}".
    """
    title_parts = []
    if proj.nickname:
        title_parts.append(Span(f"{proj.nickname} - ", ITALIC))
    title_parts.append(Span(proj.title))

    return padded(
        stack(
            paragraph(*title_parts, style=ENTRY_HEADER_STYLE),
            paragraph(f"{proj.organization} - {proj.year}", style=BODY_STYLE),
        ),
        PROJECT_CELL_MARGINS,
    )


def projects_grid(projects: Sequence[Project]) -> Block:
    """
    Three equal columns, filled row by row in input order.

    A list of n projects yields ceil(n / 3) rows; the last row simply has
    fewer cells when n is not a multiple of 3.
    """
    rows = tuple(
        tuple(project_cell(proj) for proj in group)
        for group in chunked(list(projects), PROJECT_COLUMNS)
    )
    grid = Grid(column_weights=(1,) * PROJECT_COLUMNS, rows=rows)
    return padded(grid, SECTION_MARGINS)
