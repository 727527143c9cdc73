"""
Settings context logger.

Provides logging interface for the settings context with automatic [settings] prefix.
All settings modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[settings]"


def _log_info(message: str) -> None:
    """Log info message with [settings] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [settings] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [settings] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [settings] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
