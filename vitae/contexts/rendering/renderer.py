"""
PDF Renderer

Lays a document tree out with reportlab platypus and writes it to a
temporary PDF file.

Mapping from document blocks to flowables:
- Paragraph  -> Paragraph with one <font> run per span
- BulletList -> ListFlowable of bullet items
- Grid       -> Table with absolute column widths derived from the weights
- Image      -> Image sized from its pixel dimensions at IMAGE_DPI
- Break      -> Spacer of n base lines
- Stack      -> its children, in order
- Padded     -> PaddedBox
"""

import itertools
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
from xml.sax.saxutils import escape

from reportlab.lib.colors import Color
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4, LEGAL, LETTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import inch, mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.platypus import Flowable
from reportlab.platypus import Image as PdfImage
from reportlab.platypus import ListFlowable, ListItem
from reportlab.platypus import Paragraph as PdfParagraph
from reportlab.platypus import SimpleDocTemplate, Spacer, Table, TableStyle
from reportlab.platypus.doctemplate import LayoutError

from vitae.contexts.layout.document import (
    Alignment,
    Block,
    Break,
    BulletList,
    Document,
    FontFamily,
    Grid,
    Image,
    Padded,
    PageSettings,
    Paragraph,
    Span,
    Stack,
    Style,
)
from vitae.contexts.rendering.flowables import PaddedBox
from vitae.contexts.rendering.logger import _log_debug, _log_error, log_render_start
from vitae.exceptions import RenderError

PAPER_SIZES = {"letter": LETTER, "a4": A4, "legal": LEGAL}

# Natural line height as a multiple of the font size
LEADING_FACTOR = 1.2

# Resolution assumed for raster assets when converting pixels to points
IMAGE_DPI = 300

# SimpleDocTemplate's frame pads its content on every side
FRAME_PADDING = 6

# Space kept to the right of each grid cell (points)
CELL_GUTTER = 6

# Bullet indent as a multiple of the list's font size
BULLET_INDENT = 1.5

NBSP = "\u00a0"

TEXT_ALIGNMENTS = {
    Alignment.LEFT: TA_LEFT,
    Alignment.CENTER: TA_CENTER,
    Alignment.RIGHT: TA_RIGHT,
    Alignment.JUSTIFY: TA_JUSTIFY,
}

FLOWABLE_ALIGNMENTS = {
    Alignment.LEFT: "LEFT",
    Alignment.CENTER: "CENTER",
    Alignment.RIGHT: "RIGHT",
    Alignment.JUSTIFY: "LEFT",
}


def _color(rgb: Tuple[int, int, int]) -> Color:
    red, green, blue = rgb
    return Color(red / 255, green / 255, blue / 255)


def _hex_color(rgb: Tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def register_fonts(fonts: FontFamily) -> None:
    """
    Register a TTF font family with reportlab (no-op for built-in families).

    Raises:
        RenderError: If a font file cannot be read
    """
    if fonts.files is None:
        return

    registered = set(pdfmetrics.getRegisteredFontNames())
    faces = (fonts.regular, fonts.bold, fonts.italic, fonts.bold_italic)
    try:
        for face, path in zip(faces, fonts.files):
            if face not in registered:
                pdfmetrics.registerFont(TTFont(face, str(path)))
                _log_debug(f"Registered font {face} from {path}")
    except (TTFError, OSError) as e:
        raise RenderError(f"Unable to load font family {fonts.name}", e) from e

    pdfmetrics.registerFontFamily(
        fonts.name,
        normal=fonts.regular,
        bold=fonts.bold,
        italic=fonts.italic,
        boldItalic=fonts.bold_italic,
    )


class StoryBuilder:
    """
    Converts document blocks into reportlab flowables.

    Styles cascade exactly as in the document tree: each container merges
    its own style over the inherited one before converting its children.
    """

    def __init__(self, page: PageSettings):
        self.page = page
        self.fonts = page.fonts
        self._style_ids = itertools.count()

    @property
    def base_leading(self) -> float:
        return self.page.font_size * self.page.line_spacing * LEADING_FACTOR

    def build(self, blocks: Sequence[Block], width: float) -> List[Flowable]:
        story = []
        base_style = self.page.base_style
        for block in blocks:
            story.extend(self.convert(block, base_style, width))
        return story

    def convert(self, block: Block, style: Style, width: float) -> List[Flowable]:
        """
        Convert one block.

        Args:
            block: Document block
            style: Fully resolved style inherited from the enclosing blocks
            width: Width available to the block, in points
        """
        if isinstance(block, Paragraph):
            return [self.paragraph(block, style)]
        elif isinstance(block, BulletList):
            return self.bullet_list(block, style)
        elif isinstance(block, Grid):
            return self.grid(block, style, width)
        elif isinstance(block, Image):
            return [self.image(block)]
        elif isinstance(block, Break):
            return [Spacer(0, block.lines * self.base_leading)]
        elif isinstance(block, Stack):
            inner_style = style.merge(block.style)
            flowables = []
            for child in block.children:
                flowables.extend(self.convert(child, inner_style, width))
            return flowables
        elif isinstance(block, Padded):
            margins = block.margins
            inner_width = max(width - margins.horizontal * mm, 0)
            return [
                PaddedBox(
                    self.convert(block.child, style, inner_width),
                    top=margins.top * mm,
                    right=margins.right * mm,
                    bottom=margins.bottom * mm,
                    left=margins.left * mm,
                )
            ]
        else:
            raise RenderError(f"Unknown document block: {type(block).__name__}")

    def _span_markup(self, span: Span, style: Style) -> str:
        span_style = style.merge(span.style)
        face = self.fonts.face(bold=bool(span_style.bold), italic=bool(span_style.italic))
        return (
            f'<font name="{face}" size="{span_style.font_size}" '
            f'color="{_hex_color(span_style.color)}">{escape(span.text)}</font>'
        )

    def paragraph(self, block: Paragraph, inherited: Style) -> PdfParagraph:
        style = inherited.merge(block.style)
        # An empty paragraph still occupies one line
        spans = block.spans if block.text else (Span(NBSP),)

        markup = "".join(self._span_markup(span, style) for span in spans)
        largest = max(style.merge(span.style).font_size for span in spans)
        paragraph_style = ParagraphStyle(
            name=f"vitae-{next(self._style_ids)}",
            fontName=self.fonts.face(bold=bool(style.bold), italic=bool(style.italic)),
            fontSize=style.font_size,
            leading=largest * style.line_spacing * LEADING_FACTOR,
            textColor=_color(style.color),
            alignment=TEXT_ALIGNMENTS[block.alignment],
        )
        return PdfParagraph(markup, paragraph_style)

    def bullet_list(self, block: BulletList, inherited: Style) -> List[Flowable]:
        if not block.items:
            return []

        style = inherited.merge(block.style)
        items = [ListItem(self.paragraph(item, style)) for item in block.items]
        return [
            ListFlowable(
                items,
                bulletType="bullet",
                start=block.bullet,
                leftIndent=style.font_size * BULLET_INDENT,
                bulletFontName=self.fonts.regular,
                bulletFontSize=style.font_size,
                bulletColor=_color(style.color),
            )
        ]

    def grid(self, block: Grid, inherited: Style, width: float) -> List[Flowable]:
        if not block.rows:
            return []

        style = inherited.merge(block.style)
        total_weight = sum(block.column_weights)
        column_widths = [width * weight / total_weight for weight in block.column_weights]

        data = []
        for row in block.rows:
            cells = [
                self.convert(cell, style, max(column_widths[i] - CELL_GUTTER, 0))
                for i, cell in enumerate(row)
            ]
            # reportlab needs rectangular data; short rows are padded only here
            cells.extend("" for _ in range(len(column_widths) - len(row)))
            data.append(cells)

        table = Table(data, colWidths=column_widths, hAlign="LEFT")
        table.setStyle(
            TableStyle(
                [
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("LEFTPADDING", (0, 0), (-1, -1), 0),
                    ("RIGHTPADDING", (0, 0), (-1, -1), CELL_GUTTER),
                    ("TOPPADDING", (0, 0), (-1, -1), 0),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
                ]
            )
        )
        return [table]

    def image(self, block: Image) -> PdfImage:
        try:
            pixel_width, pixel_height = ImageReader(str(block.path)).getSize()
        except OSError as e:
            raise RenderError(f"Unable to read image {block.path}", e) from e

        scale_x, scale_y = block.scale
        flowable = PdfImage(
            str(block.path),
            width=pixel_width / IMAGE_DPI * inch * scale_x,
            height=pixel_height / IMAGE_DPI * inch * scale_y,
        )
        flowable.hAlign = FLOWABLE_ALIGNMENTS[block.alignment]
        return flowable


def render(document: Document, directory: Optional[Path] = None) -> Path:
    """
    Render a document tree to a temporary PDF file.

    The caller owns the returned file and must delete it.

    Args:
        document: Document to render
        directory: Directory for the temporary file (default: system temp dir)

    Returns:
        Path to the rendered temporary PDF

    Raises:
        RenderError: If the tree cannot be laid out or the file cannot be
                     created; no temporary file is left behind
    """
    page = document.page
    pagesize = PAPER_SIZES.get(page.paper_size.lower())
    if pagesize is None:
        raise RenderError(f"Unknown paper size: {page.paper_size}")

    register_fonts(page.fonts)

    try:
        with tempfile.NamedTemporaryFile(
            prefix="vitae-", suffix=".pdf", dir=directory, delete=False
        ) as handle:
            temp_path = Path(handle.name)
    except OSError as e:
        raise RenderError("Unable to create a temporary PDF file", e) from e

    log_render_start(page.title, temp_path, len(document.blocks))

    margins = page.margins
    template = SimpleDocTemplate(
        str(temp_path),
        pagesize=pagesize,
        topMargin=margins.top * mm,
        rightMargin=margins.right * mm,
        bottomMargin=margins.bottom * mm,
        leftMargin=margins.left * mm,
        title=page.title,
        author=page.author,
        creator="vitae",
    )
    frame_width = template.width - 2 * FRAME_PADDING

    try:
        story = StoryBuilder(page).build(document.blocks, frame_width)
        template.build(story)
    except RenderError:
        temp_path.unlink(missing_ok=True)
        raise
    except (LayoutError, OSError) as e:
        temp_path.unlink(missing_ok=True)
        _log_error(f"Layout failed for {page.title}: {e}")
        raise RenderError(f"Unable to lay out {page.title}", e) from e

    _log_debug(f"Rendered {page.title} to {temp_path}")
    return temp_path
