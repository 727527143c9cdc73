"""
Document Tree

Immutable representation of a styled, paginated document before rendering.

A document is an ordered tree of blocks:
- Paragraph: a run of styled text spans
- BulletList: paragraphs prefixed by a bullet glyph
- Grid: fixed-weight columns with rows of cells (rows may be short)
- Image: a raster asset scaled relative to its natural size
- Break: vertical whitespace measured in lines
- Stack: vertical sequence of blocks
- Padded: a block wrapped in top/right/bottom/left margins (millimetres)

Styles cascade from containers to their content. Every field of Style is
optional; when a container style is merged with a child style the child's
explicit fields win. Trees are built bottom-up with the constructor helpers
at the bottom of this module and are never mutated once built.
"""

from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

Color = Tuple[int, int, int]


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


@dataclass(frozen=True)
class Style:
    """
    Text style. None means "inherit from the enclosing block".

    Attributes:
        font_size: Size in points
        color: RGB triple, 0-255 per channel
        bold: Use the bold face
        italic: Use the italic face
        line_spacing: Multiplier applied to the natural line height
    """

    font_size: Optional[float] = None
    color: Optional[Color] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    line_spacing: Optional[float] = None

    def merge(self, other: Optional["Style"]) -> "Style":
        """Return a new Style where other's explicit fields override this one's."""
        if other is None:
            return self
        values = {}
        for f in fields(self):
            override = getattr(other, f.name)
            values[f.name] = override if override is not None else getattr(self, f.name)
        return Style(**values)


PLAIN = Style()


@dataclass(frozen=True)
class Margins:
    """Margins in millimetres, in CSS top/right/bottom/left order."""

    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    @classmethod
    def trbl(cls, top: float, right: float, bottom: float, left: float) -> "Margins":
        return cls(top=top, right=right, bottom=bottom, left=left)

    @classmethod
    def all(cls, value: float) -> "Margins":
        return cls(top=value, right=value, bottom=value, left=value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right


@dataclass(frozen=True)
class Span:
    text: str
    style: Style = PLAIN


@dataclass(frozen=True)
class Paragraph:
    spans: Tuple[Span, ...]
    style: Style = PLAIN
    alignment: Alignment = Alignment.LEFT

    @property
    def text(self) -> str:
        """Concatenated plain text of all spans."""
        return "".join(span.text for span in self.spans)


@dataclass(frozen=True)
class BulletList:
    items: Tuple[Paragraph, ...]
    bullet: str = "•"
    style: Style = PLAIN


@dataclass(frozen=True)
class Image:
    """
    Raster image placed on its own line.

    Attributes:
        path: Image file on disk
        scale: (x, y) multipliers applied to the image's natural size
        alignment: Horizontal placement
    """

    path: Path
    scale: Tuple[float, float] = (1.0, 1.0)
    alignment: Alignment = Alignment.CENTER


@dataclass(frozen=True)
class Break:
    lines: float = 1.0


@dataclass(frozen=True)
class Stack:
    children: Tuple["Block", ...]
    style: Style = PLAIN


@dataclass(frozen=True)
class Padded:
    child: "Block"
    margins: Margins


@dataclass(frozen=True)
class Grid:
    """
    Table with fixed relative column widths.

    Rows may hold fewer cells than there are columns; missing trailing cells
    are absent, not blank. A row with more cells than columns is rejected.

    Attributes:
        column_weights: Relative column widths (e.g., (1, 1, 1) for thirds)
        rows: Rows of cells, each cell a block
        style: Style cascaded into every cell
    """

    column_weights: Tuple[float, ...]
    rows: Tuple[Tuple["Block", ...], ...]
    style: Style = PLAIN

    def __post_init__(self):
        if not self.column_weights or any(w <= 0 for w in self.column_weights):
            raise ValueError(f"Column weights must be positive, got {self.column_weights}")
        for i, row in enumerate(self.rows):
            if len(row) > len(self.column_weights):
                raise ValueError(
                    f"Row {i} has {len(row)} cells but grid has "
                    f"{len(self.column_weights)} columns"
                )


Block = Union[Paragraph, BulletList, Image, Break, Stack, Padded, Grid]


@dataclass(frozen=True)
class FontFamily:
    """
    The four faces of a font family.

    Attributes:
        name: Family name used for registration
        regular, bold, italic, bold_italic: Face names
        files: TTF files for the four faces (same order), or None for a
               family built into the PDF renderer
    """

    name: str
    regular: str
    bold: str
    italic: str
    bold_italic: str
    files: Optional[Tuple[Path, Path, Path, Path]] = None

    def face(self, bold: bool = False, italic: bool = False) -> str:
        if bold and italic:
            return self.bold_italic
        if bold:
            return self.bold
        if italic:
            return self.italic
        return self.regular


HELVETICA = FontFamily(
    name="Helvetica",
    regular="Helvetica",
    bold="Helvetica-Bold",
    italic="Helvetica-Oblique",
    bold_italic="Helvetica-BoldOblique",
)


@dataclass(frozen=True)
class PageSettings:
    """
    Document-wide settings.

    Attributes:
        title: PDF metadata title
        paper_size: Paper name understood by the renderer ("letter", "a4")
        font_size: Base font size in points
        line_spacing: Base line spacing multiplier
        margins: Page margins in millimetres
        fonts: Base font family
        author: PDF metadata author
    """

    title: str
    paper_size: str = "letter"
    font_size: float = 10
    line_spacing: float = 1.0
    margins: Margins = Margins.trbl(10, 10, 10, 10)
    fonts: FontFamily = HELVETICA
    author: str = ""

    @property
    def base_style(self) -> Style:
        return Style(
            font_size=self.font_size,
            color=(0, 0, 0),
            bold=False,
            italic=False,
            line_spacing=self.line_spacing,
        )


@dataclass(frozen=True)
class Document:
    page: PageSettings
    blocks: Tuple[Block, ...]


# Constructor helpers


def span(
    text: str,
    font_size: Optional[float] = None,
    color: Optional[Color] = None,
    bold: Optional[bool] = None,
    italic: Optional[bool] = None,
    line_spacing: Optional[float] = None,
) -> Span:
    return Span(text, Style(font_size, color, bold, italic, line_spacing))


def paragraph(
    *parts: Union[str, Span],
    style: Style = PLAIN,
    alignment: Alignment = Alignment.LEFT,
) -> Paragraph:
    """Build a paragraph from plain strings and/or styled spans."""
    spans = tuple(part if isinstance(part, Span) else Span(part) for part in parts)
    return Paragraph(spans=spans, style=style, alignment=alignment)


def stack(*children: Block, style: Style = PLAIN) -> Stack:
    return Stack(children=tuple(children), style=style)


def padded(child: Block, margins: Margins) -> Padded:
    return Padded(child=child, margins=margins)


def to_plaintext(node: Union[Document, Block]) -> List[str]:
    """
    Flatten a document or block into its lines of text.

    Paragraphs yield one line each, bullet items yield "{bullet} {text}",
    grid cells are read row by row. Images and breaks yield nothing.
    """
    if isinstance(node, Document):
        lines = []
        for block in node.blocks:
            lines.extend(to_plaintext(block))
        return lines
    elif isinstance(node, Paragraph):
        return [node.text]
    elif isinstance(node, BulletList):
        return [f"{node.bullet} {item.text}" for item in node.items]
    elif isinstance(node, Stack):
        lines = []
        for child in node.children:
            lines.extend(to_plaintext(child))
        return lines
    elif isinstance(node, Padded):
        return to_plaintext(node.child)
    elif isinstance(node, Grid):
        lines = []
        for row in node.rows:
            for cell in row:
                lines.extend(to_plaintext(cell))
        return lines
    elif isinstance(node, (Image, Break)):
        return []
    else:
        raise TypeError(f"Unknown document node: {type(node).__name__}")
