"""
Rendering Context

Responsibilities:
- Lays document trees out as PDF (reportlab)
- Shrinks rendered PDFs with Ghostscript and relays its output
- Normalizes output paths and cleans up temporary files

Owns: Temporary PDFs, the final output file
Never: Decides document content or block order
"""

from vitae.contexts.rendering.ghostscript import PostProcessResult, postprocess
from vitae.contexts.rendering.pipeline import BuildResult, build_pdf
from vitae.contexts.rendering.renderer import render

__all__ = ["BuildResult", "PostProcessResult", "build_pdf", "postprocess", "render"]
