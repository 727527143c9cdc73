"""
Composing Context

Responsibilities:
- Selects the base font family from bundled assets
- Builds the résumé and cover-letter document trees from layout primitives
- Supplies built-in content when the user has none stored

Owns: Document page settings, block order, built-in prose
Never: Renders PDFs or reads settings files (callers pass values in)
"""

from vitae.contexts.composing.assets import FONTS_DIR, font_family, rule_image_path
from vitae.contexts.composing.cover_letter import build_cover_letter, format_letter_date
from vitae.contexts.composing.defaults import DEFAULT_CONTACT, DEFAULT_RESUME
from vitae.contexts.composing.resume import build_resume

__all__ = [
    "FONTS_DIR",
    "font_family",
    "rule_image_path",
    "build_resume",
    "build_cover_letter",
    "format_letter_date",
    "DEFAULT_CONTACT",
    "DEFAULT_RESUME",
]
