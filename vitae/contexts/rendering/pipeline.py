"""
Build Pipeline

Runs a composed document through the whole output path:
normalize output path -> render to a temporary PDF -> shrink (or move) into place.
"""

import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from vitae.contexts.layout.document import Document
from vitae.contexts.rendering.ghostscript import (
    GHOSTSCRIPT,
    PDF_PRESET,
    PostProcessResult,
    postprocess,
)
from vitae.contexts.rendering.logger import _log_debug, _log_info, log_build_result
from vitae.contexts.rendering.renderer import render
from vitae.exceptions import RenderError
from vitae.utils.paths import normalize_output_path
from vitae.utils.pdf_processing import page_count


@dataclass
class BuildResult:
    """
    Result of building a PDF.

    Attributes:
        output_path: Normalized final PDF path
        shrunk: Whether the PDF went through the shrink step
        page_count: Pages in the final PDF (None if it is missing or unreadable)
        postprocess: Shrink step result (None when shrinking was skipped)
    """

    output_path: Path
    shrunk: bool
    page_count: Optional[int] = None
    postprocess: Optional[PostProcessResult] = None

    @property
    def success(self) -> bool:
        return self.output_path.exists()


def build_pdf(
    document: Document,
    output: Union[str, Path],
    shrink: bool = True,
    ghostscript: str = GHOSTSCRIPT,
    preset: str = PDF_PRESET,
) -> BuildResult:
    """
    Render a document and write the final PDF.

    Args:
        document: Composed document
        output: Requested output path; ".pdf" is appended when missing
        shrink: Run the Ghostscript shrink step (default: True)
        ghostscript: Ghostscript executable
        preset: Ghostscript -dPDFSETTINGS preset

    Returns:
        BuildResult describing the final file

    Raises:
        RenderError: If the document cannot be rendered or moved into place
        PostProcessError: If Ghostscript cannot be started
    """
    output_path = normalize_output_path(output)
    _log_info(f"Building {document.page.title} -> {output_path}")

    start_time = time.time()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RenderError(f"Unable to create output directory {output_path.parent}", e) from e

    temp_path = render(document)

    postprocess_result = None
    if shrink:
        # A file left by an earlier build must not pass for this one
        try:
            output_path.unlink(missing_ok=True)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise RenderError(f"Unable to replace {output_path}", e) from e
        postprocess_result = postprocess(temp_path, output_path, ghostscript, preset)
    else:
        try:
            shutil.move(str(temp_path), str(output_path))
            _log_debug(f"Moved {temp_path} to {output_path}")
        except OSError as e:
            raise RenderError(f"Unable to write {output_path}", e) from e
        finally:
            temp_path.unlink(missing_ok=True)
    elapsed_time = time.time() - start_time

    result = BuildResult(
        output_path=output_path,
        shrunk=shrink,
        page_count=page_count(output_path) if output_path.exists() else None,
        postprocess=postprocess_result,
    )
    log_build_result(result, elapsed_time)
    return result
