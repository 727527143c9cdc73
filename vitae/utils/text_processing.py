"""Text processing utilities for composing document content."""

import re
from typing import List, Tuple

BOLD_MARKER_PATTERN = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)


def split_bold_markup(text: str) -> List[Tuple[str, bool]]:
    """
    Split text on **bold** markers into (segment, is_bold) pairs.

    Unmatched markers are left in the text as-is. Empty segments are dropped.

    Example:
        >>> split_bold_markup("Experienced **ML engineer** with flair")
        [('Experienced ', False), ('ML engineer', True), (' with flair', False)]
    """
    segments = []
    pos = 0

    for match in BOLD_MARKER_PATTERN.finditer(text):
        if match.start() > pos:
            segments.append((text[pos : match.start()], False))
        segments.append((match.group(1), True))
        pos = match.end()

    if pos < len(text):
        segments.append((text[pos:], False))

    return [(segment, bold) for segment, bold in segments if segment]


def mask_secret(value: str, visible: int = 4) -> str:
    """Mask all but the last few characters of a secret for display."""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
