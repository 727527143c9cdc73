"""
Résumé Builder

Composes the one-page résumé: name header, rule, a summary section titled
with the target position, then skills, experience, education and projects,
closed by the contact footer.
"""

from typing import Optional

from vitae.contexts.composing.assets import font_family, rule_image_path
from vitae.contexts.composing.decorations import contact_line, name_line, rule
from vitae.contexts.composing.defaults import DEFAULT_CONTACT, DEFAULT_RESUME, DEFAULT_SUMMARY
from vitae.contexts.composing.logger import log_document_built
from vitae.contexts.layout.document import (
    Alignment,
    Block,
    Break,
    Document,
    FontFamily,
    Margins,
    PageSettings,
    Span,
    Style,
    padded,
    paragraph,
    stack,
)
from vitae.contexts.layout.primitives import (
    education_block,
    employment_block,
    projects_grid,
    section_title,
    skills_block,
)
from vitae.contexts.layout.records import ResumeContent
from vitae.contexts.layout.styles import BODY_STYLE, BOLD, MUTED_COLOR, SECTION_MARGINS
from vitae.utils.text_processing import split_bold_markup

RESUME_FONT_SIZE = 9
RESUME_LINE_SPACING = 1.2
NAME_FONT_SIZE = 27
HEADER_MARGINS = Margins.trbl(0, 12, 0, 12)
RULE_SCALE = (4.0, 1.0)
SECTION_GAP = 0.5

FOOTER_STYLE = Style(font_size=10, color=MUTED_COLOR, line_spacing=1.0)


def summary_block(summary: str) -> Block:
    """Summary paragraph with **marked** runs set in bold."""
    spans = [Span(text, BOLD) if bold else Span(text) for text, bold in split_bold_markup(summary)]
    return padded(stack(paragraph(*spans, style=BODY_STYLE)), SECTION_MARGINS)


def build_resume(
    name: str,
    position: str,
    content: Optional[ResumeContent] = None,
    contact: Optional[str] = None,
    fonts: Optional[FontFamily] = None,
) -> Document:
    """
    Build the résumé document tree.

    Args:
        name: Full name for the header
        position: Target position, used as the summary section title
        content: Résumé records (default: built-in content)
        contact: Contact footer line (default: built-in contact line)
        fonts: Base font family (default: bundled Rubik, else Helvetica)

    Returns:
        Document ready for rendering

    Raises:
        AssetNotFoundError: If the rule image is missing
    """
    if content is None:
        content = DEFAULT_RESUME

    page = PageSettings(
        title="Resume",
        paper_size="letter",
        font_size=RESUME_FONT_SIZE,
        line_spacing=RESUME_LINE_SPACING,
        fonts=fonts or font_family(),
        author=name,
    )

    blocks = (
        padded(stack(name_line(name, NAME_FONT_SIZE, Alignment.LEFT)), HEADER_MARGINS),
        rule(rule_image_path(), RULE_SCALE),
        Break(SECTION_GAP),
        section_title(position),
        summary_block(content.summary or DEFAULT_SUMMARY),
        Break(SECTION_GAP),
        section_title("Skills"),
        skills_block(content.skills),
        Break(SECTION_GAP),
        section_title("Experience"),
        employment_block(content.employment),
        Break(SECTION_GAP),
        section_title("Education"),
        education_block(content.education),
        Break(SECTION_GAP),
        section_title("Projects"),
        projects_grid(content.projects),
        Break(SECTION_GAP),
        contact_line(contact or DEFAULT_CONTACT, style=FOOTER_STYLE),
    )

    document = Document(page=page, blocks=blocks)
    log_document_built("resume", document)
    return document
