"""
Layout Context

Responsibilities:
- Defines the typed résumé records (Skill, WorkExperience, Degree, Project)
- Defines the immutable document tree and its style cascade
- Turns records into styled document fragments (layout primitives)

Owns: Record types, document tree, layout primitives
Never: Touches the filesystem or decides page-level settings
"""

from vitae.contexts.layout.document import (
    Alignment,
    Document,
    FontFamily,
    Margins,
    PageSettings,
    Style,
    to_plaintext,
)
from vitae.contexts.layout.primitives import (
    chunked,
    education_block,
    employment_block,
    projects_grid,
    section_title,
    skills_block,
)
from vitae.contexts.layout.records import (
    Degree,
    Project,
    ResumeContent,
    Skill,
    WorkExperience,
)

__all__ = [
    # Records
    "Skill",
    "WorkExperience",
    "Degree",
    "Project",
    "ResumeContent",
    # Document tree
    "Alignment",
    "Document",
    "FontFamily",
    "Margins",
    "PageSettings",
    "Style",
    "to_plaintext",
    # Primitives
    "chunked",
    "section_title",
    "skills_block",
    "employment_block",
    "education_block",
    "projects_grid",
]
