"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(title: str, temp_path: Path, num_blocks: int) -> None:
    """Log start of layout with context."""
    _log_info(f"Rendering: {title}")
    _log_debug(f"  Temporary PDF: {temp_path}")
    _log_debug(f"  Top-level blocks: {num_blocks}")


def log_postprocess_result(result, elapsed_time: float) -> None:
    """
    Log the outcome of the shrink step.

    Args:
        result: PostProcessResult from postprocess()
        elapsed_time: Time taken by the external tool
    """
    if result.success:
        _log_success(f"Shrunk PDF written to {result.output_path} ({elapsed_time:.2f}s)")
    else:
        _log_warning(
            f"Post-processor exited with code {result.returncode} ({elapsed_time:.2f}s); "
            "its output was relayed unchanged"
        )

    # Use opt(raw=True) to keep the tool's multi-line output intact in the log file
    if result.stdout:
        logger.opt(raw=True).debug(
            f"\n{'=' * 80}\nGHOSTSCRIPT STDOUT:\n{'=' * 80}\n{result.stdout}\n"
        )
    if result.stderr:
        logger.opt(raw=True).debug(
            f"\n{'=' * 80}\nGHOSTSCRIPT STDERR:\n{'=' * 80}\n{result.stderr}\n"
        )


def log_build_result(result, elapsed_time: float) -> None:
    """
    Log the outcome of a full build.

    Args:
        result: BuildResult from build_pdf()
        elapsed_time: Time taken to render and post-process
    """
    if result.success:
        pages = f"{result.page_count} page(s)" if result.page_count is not None else "unknown pages"
        _log_success(f"Built {result.output_path}: {pages} ({elapsed_time:.2f}s)")
    else:
        _log_error(f"No PDF was produced at {result.output_path} ({elapsed_time:.2f}s)")
