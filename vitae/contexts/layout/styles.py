"""
Shared typography for résumé and cover-letter documents.

Colors are RGB triples; sizes are points; margins are millimetres.
"""

from vitae.contexts.layout.document import Margins, Style

# Palette
NAME_COLOR = (26, 92, 113)
BANNER_COLOR = (129, 173, 187)
ACCENT_COLOR = (54, 125, 162)
BODY_COLOR = (50, 50, 50)
MUTED_COLOR = (96, 96, 96)

# Text styles
SECTION_TITLE_STYLE = Style(font_size=12, color=ACCENT_COLOR, bold=True, line_spacing=1.0)
ENTRY_HEADER_STYLE = Style(font_size=10, color=ACCENT_COLOR, line_spacing=1.0)
BODY_STYLE = Style(font_size=9, color=BODY_COLOR, line_spacing=1.0)
BANNER_STYLE = Style(font_size=8, color=BANNER_COLOR, bold=True, line_spacing=1.5)
NAME_STYLE = Style(font_size=26, color=NAME_COLOR, bold=True)
CONTACT_STYLE = Style(font_size=8, color=NAME_COLOR, bold=True, line_spacing=1.0)

# Emphasis-only styles for spans
BOLD = Style(bold=True)
ITALIC = Style(italic=True)

# Indentation of résumé sections
SECTION_MARGINS = Margins.trbl(0, 12, 0, 32)
PROJECT_CELL_MARGINS = Margins.trbl(0, 0, 4, 0)
