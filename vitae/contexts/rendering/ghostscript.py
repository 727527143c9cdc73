"""
PDF Post-processing

Shrinks a rendered PDF with Ghostscript's pdfwrite device.

The tool's stdout and stderr are relayed verbatim to this process's own
streams. A non-zero exit status is reported in the result rather than raised,
and the input file is removed whatever the outcome.
"""

import os
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from vitae.contexts.rendering.logger import _log_debug, _log_info, log_postprocess_result
from vitae.exceptions import PostProcessError

load_dotenv()

GHOSTSCRIPT = os.getenv("CV_GHOSTSCRIPT", "gs")
PDF_PRESET = os.getenv("CV_PDF_PRESET", "/ebook")


@dataclass
class PostProcessResult:
    """
    Result of a Ghostscript run.

    Attributes:
        returncode: Exit status of the tool
        output_path: Where the shrunk PDF was requested
        stdout: Standard output from the tool
        stderr: Standard error from the tool
    """

    returncode: int
    output_path: Path
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0 and self.output_path.exists()


def ghostscript_command(
    input_path: Path,
    output_path: Path,
    ghostscript: str = GHOSTSCRIPT,
    preset: str = PDF_PRESET,
) -> List[str]:
    """Build the Ghostscript command line for shrinking `input_path` into `output_path`."""
    return [
        ghostscript,
        "-sDEVICE=pdfwrite",
        "-dCompatibilityLevel=1.4",
        f"-dPDFSETTINGS={preset}",
        "-dNOPAUSE",
        "-dQUIET",
        "-dBATCH",
        f"-sOutputFile={output_path}",
        str(input_path),
    ]


def postprocess(
    input_path: Path,
    output_path: Path,
    ghostscript: str = GHOSTSCRIPT,
    preset: str = PDF_PRESET,
) -> PostProcessResult:
    """
    Shrink a PDF with Ghostscript, then delete the input.

    Args:
        input_path: Rendered (temporary) PDF; always removed afterwards
        output_path: Final PDF location
        ghostscript: Ghostscript executable (default: CV_GHOSTSCRIPT or "gs")
        preset: -dPDFSETTINGS preset (default: CV_PDF_PRESET or "/ebook")

    Returns:
        PostProcessResult with the exit status and captured streams

    Raises:
        PostProcessError: If the executable cannot be started
    """
    cmd = ghostscript_command(input_path, output_path, ghostscript, preset)
    _log_info(f"Shrinking PDF with {ghostscript} ({preset})")
    _log_debug(f"  Command: {' '.join(cmd)}")

    start_time = time.time()
    try:
        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise PostProcessError(ghostscript, e) from e
    finally:
        input_path.unlink(missing_ok=True)
        _log_debug(f"Removed temporary PDF {input_path}")
    elapsed_time = time.time() - start_time

    sys.stdout.write(completed.stdout)
    sys.stdout.flush()
    sys.stderr.write(completed.stderr)
    sys.stderr.flush()

    result = PostProcessResult(
        returncode=completed.returncode,
        output_path=output_path,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )
    log_postprocess_result(result, elapsed_time)
    return result
