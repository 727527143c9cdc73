"""Header, rule and footer blocks shared by the résumé and the cover letter."""

from typing import Tuple

from vitae.contexts.layout.document import (
    Alignment,
    Block,
    Image,
    Paragraph,
    Style,
    paragraph,
    span,
)
from vitae.contexts.layout.styles import BANNER_STYLE, CONTACT_STYLE, NAME_STYLE


def banner(label: str) -> Paragraph:
    """Small, bold, centred caption such as "FROM THE DESK OF"."""
    return paragraph(label, style=BANNER_STYLE, alignment=Alignment.CENTER)


def name_line(name: str, font_size: float, alignment: Alignment) -> Paragraph:
    """The upper-cased name, set in the name style at the given size."""
    return paragraph(
        span(name.upper(), font_size=font_size),
        style=NAME_STYLE,
        alignment=alignment,
    )


def rule(rule_path, scale: Tuple[float, float]) -> Image:
    return Image(path=rule_path, scale=scale, alignment=Alignment.CENTER)


def contact_line(contact: str, style: Style = CONTACT_STYLE) -> Block:
    return paragraph(contact, style=style, alignment=Alignment.CENTER)
