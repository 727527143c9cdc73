"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logger setup
- Output path normalization
- Text processing
"""

from vitae.utils.paths import normalize_output_path
from vitae.utils.text_processing import mask_secret, split_bold_markup

__all__ = ["normalize_output_path", "mask_secret", "split_bold_markup"]
