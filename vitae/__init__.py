"""
vitae - Résumé and cover-letter PDF builder

Composes a résumé or a cover letter from typed records and fixed prose, lays
it out as PDF and shrinks it with Ghostscript.

Architecture:
- Settings Context: Per-user defaults (name, API key, contact, résumé data)
- Layout Context: Résumé records, document tree and layout primitives
- Composing Context: Résumé and cover-letter document builders
- Rendering Context: PDF rendering, post-processing and output management
"""

__version__ = "0.1.0"
