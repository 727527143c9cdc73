"""
Composing context logger.

Provides logging interface for the composing context with automatic [compose] prefix.
All composing modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[compose]"


def _log_info(message: str) -> None:
    """Log info message with [compose] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [compose] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compose] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_document_built(kind: str, document) -> None:
    """
    Log a summary of a composed document.

    Args:
        kind: Document kind ("resume", "cover letter")
        document: Document returned by a builder
    """
    page = document.page
    _log_info(f"Composed {kind}: {len(document.blocks)} top-level blocks")
    _log_debug(
        f"  Page: {page.paper_size}, {page.font_size}pt, "
        f"line spacing {page.line_spacing}, fonts {page.fonts.name}"
    )
