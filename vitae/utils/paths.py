"""Output path helpers."""

from pathlib import Path
from typing import Union

PDF_SUFFIX = ".pdf"


def normalize_output_path(path: Union[str, Path]) -> Path:
    """
    Ensure an output path ends in exactly one .pdf extension.

    Any other suffix is kept and .pdf is appended after it, so "letter.txt"
    becomes "letter.txt.pdf". The check is case-insensitive.

    Examples:
        >>> normalize_output_path("resume")
        PosixPath('resume.pdf')
        >>> normalize_output_path("out/Resume.PDF")
        PosixPath('out/Resume.PDF')
    """
    path = Path(path).expanduser()
    if path.name.lower().endswith(PDF_SUFFIX):
        return path
    return path.with_name(f"{path.name}{PDF_SUFFIX}")
