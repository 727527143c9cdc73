"""
Cover Letter Builder

Composes a one-page cover letter: "FROM THE DESK OF" banner with the name,
a rule, the dated and addressed letter body, and a CONTACT footer.

Missing optional inputs never change the block sequence: an absent location
leaves an empty line and an absent position reads "the advertised
opportunity".
"""

from datetime import date
from typing import Optional

from vitae.contexts.composing.assets import font_family, rule_image_path
from vitae.contexts.composing.decorations import banner, contact_line, name_line, rule
from vitae.contexts.composing.defaults import (
    DEFAULT_CONTACT,
    DEFAULT_POSITION,
    LETTER_BACKGROUND,
    LETTER_CLOSING,
    LETTER_MOTIVATION,
    LETTER_OPENING,
    LETTER_SIGN_OFF,
    LETTER_THANKS,
)
from vitae.contexts.composing.logger import _log_debug, log_document_built
from vitae.contexts.layout.document import (
    Alignment,
    Block,
    Break,
    Document,
    FontFamily,
    Margins,
    PageSettings,
    padded,
    paragraph,
    stack,
)

LETTER_FONT_SIZE = 10
LETTER_LINE_SPACING = 1.3
NAME_FONT_SIZE = 32
HEADER_MARGINS = Margins.trbl(4, 44, 0, 44)
BODY_MARGINS = Margins.trbl(0, 34.5, 0, 34.5)
HEADER_RULE_SCALE = (1.0, 1.0)
FOOTER_RULE_SCALE = (2.0, 0.5)
FOOTER_GAP = 0.33


def format_letter_date(day: date) -> str:
    """
    Long-form date for the letter head, without zero padding.

    Example:
        >>> format_letter_date(date(2026, 3, 7))
        'March 7, 2026'
    """
    return f"{day:%B} {day.day}, {day.year}"


def letter_body(
    name: str,
    company: str,
    location: str,
    position: str,
    today: date,
) -> Block:
    """Date, addressee, greeting and the fixed paragraphs, one blank line apart."""
    paragraphs = [
        LETTER_OPENING.format(position=position, company=company),
        LETTER_BACKGROUND,
        LETTER_MOTIVATION.format(company=company),
        LETTER_CLOSING,
        LETTER_THANKS,
        LETTER_SIGN_OFF,
        name,
    ]

    blocks = [
        paragraph(format_letter_date(today)),
        Break(1),
        paragraph(company),
        paragraph(location),
        Break(1),
        paragraph(f"Dear {company},"),
    ]
    for text in paragraphs:
        blocks.append(Break(1))
        blocks.append(paragraph(text))

    return padded(stack(*blocks), BODY_MARGINS)


def build_cover_letter(
    name: str,
    company: str,
    location: Optional[str] = None,
    position: Optional[str] = None,
    today: Optional[date] = None,
    contact: Optional[str] = None,
    fonts: Optional[FontFamily] = None,
) -> Document:
    """
    Build the cover letter document tree.

    Args:
        name: Sender's full name
        company: Addressee company
        location: Company location (default: empty line)
        position: Position applied for (default: "advertised")
        today: Date printed in the letter head (default: today's date)
        contact: Contact footer line (default: built-in contact line)
        fonts: Base font family (default: bundled Rubik, else Helvetica)

    Returns:
        Document ready for rendering

    Raises:
        AssetNotFoundError: If the rule image is missing
    """
    if today is None:
        today = date.today()
    if location is None:
        _log_debug("No location given, leaving the address line empty")
        location = ""
    if position is None:
        _log_debug(f"No position given, using '{DEFAULT_POSITION}'")
        position = DEFAULT_POSITION

    page = PageSettings(
        title="Cover Letter",
        paper_size="letter",
        font_size=LETTER_FONT_SIZE,
        line_spacing=LETTER_LINE_SPACING,
        fonts=fonts or font_family(),
        author=name,
    )
    rule_path = rule_image_path()

    blocks = (
        padded(
            stack(banner("FROM THE DESK OF"), name_line(name, NAME_FONT_SIZE, Alignment.CENTER)),
            HEADER_MARGINS,
        ),
        Break(0.5),
        rule(rule_path, HEADER_RULE_SCALE),
        Break(1),
        letter_body(name, company, location, position, today),
        Break(1),
        banner("CONTACT"),
        Break(FOOTER_GAP),
        rule(rule_path, FOOTER_RULE_SCALE),
        Break(FOOTER_GAP),
        contact_line(contact or DEFAULT_CONTACT),
    )

    document = Document(page=page, blocks=blocks)
    log_document_built("cover letter", document)
    return document
