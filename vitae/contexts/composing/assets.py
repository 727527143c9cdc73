"""
Bundled Assets

Locates the fonts and the rule-line image shipped with the package.

The Rubik TTF files are looked up in CV_FONTS_DIR (default: the package's
assets/fonts/Rubik directory). They are not required: without them the
documents fall back to the renderer's built-in Helvetica family.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from vitae.contexts.composing.logger import _log_debug, _log_warning
from vitae.contexts.layout.document import HELVETICA, FontFamily
from vitae.exceptions import AssetNotFoundError

load_dotenv()

ASSETS_PATH = Path(__file__).resolve().parents[2] / "assets"
FONTS_DIR = Path(os.getenv("CV_FONTS_DIR", str(ASSETS_PATH / "fonts" / "Rubik"))).expanduser()
RULE_IMAGE_PATH = ASSETS_PATH / "line.ppm"

# Face name -> file name, in regular/bold/italic/bold-italic order
RUBIK_FACES = (
    ("Rubik", "Rubik-Regular.ttf"),
    ("Rubik-Bold", "Rubik-Bold.ttf"),
    ("Rubik-Italic", "Rubik-Italic.ttf"),
    ("Rubik-BoldItalic", "Rubik-BoldItalic.ttf"),
)


def font_family(fonts_dir: Optional[Path] = None) -> FontFamily:
    """
    Select the base font family for a document.

    Args:
        fonts_dir: Directory holding the Rubik TTF files (default: FONTS_DIR)

    Returns:
        The Rubik family when all four faces are present, otherwise Helvetica
    """
    if fonts_dir is None:
        fonts_dir = FONTS_DIR

    files = tuple(fonts_dir / file_name for _, file_name in RUBIK_FACES)
    missing = [path.name for path in files if not path.is_file()]
    if missing:
        _log_warning(
            f"Font files missing from {fonts_dir} ({', '.join(missing)}), using Helvetica"
        )
        return HELVETICA

    _log_debug(f"Using Rubik fonts from {fonts_dir}")
    regular, bold, italic, bold_italic = (face for face, _ in RUBIK_FACES)
    return FontFamily(
        name="Rubik",
        regular=regular,
        bold=bold,
        italic=italic,
        bold_italic=bold_italic,
        files=files,
    )


def rule_image_path(path: Path = RULE_IMAGE_PATH) -> Path:
    """
    Return the horizontal rule image.

    Raises:
        AssetNotFoundError: If the image is not on disk
    """
    if not path.is_file():
        raise AssetNotFoundError(path)
    return path
