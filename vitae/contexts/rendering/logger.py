"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Optional[Path], config) -> Optional[Path]:
    """
    Setup logger for a build run.

    Args:
        log_dir: Directory for this build session (None for console only)
        config: BuildConfig for the run, recorded in the provenance header

    Returns:
        Path to log file, or None
    """
    return _setup_logger(
        context_name="build",
        log_dir=log_dir,
        extra_provenance={
            "Project root": config.root,
            "CSS compiler": " ".join(config.css_compiler),
            "CSS prefixer": " ".join(config.css_prefixer),
        },
    )


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


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_css_result(result, elapsed_time: float) -> None:
    """
    Log CSS pipeline result with diagnostics.

    Args:
        result: CssProcessingResult from process_stylesheet()
        elapsed_time: Time taken by all steps
    """
    if result.success:
        _log_info(f"CSS processed: {len(result.css)} characters ({elapsed_time:.2f}s)")
    else:
        _log_error(f"CSS processing failed: {len(result.errors)} errors ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors[:5], 1):
            _log_error(f"  Error {i}: {err}")

    # Use opt(raw=True) to keep multi-line tool output unformatted
    if result.stderr:
        logger.opt(raw=True).debug(f"\n{'=' * 80}\nCSS TOOL STDERR:\n{'=' * 80}\n{result.stderr}\n")


def log_build_summary(output_path: Path, size_kb: float, theme: dict, all_themes: dict) -> None:
    """Log the final build summary."""
    _log_success("Resume built successfully!")
    _log_info(f"Output: {output_path} ({size_kb:.1f} KB)")
    _log_info(f"Default Theme: {theme.get('name', '(unnamed)')}")
    _log_info(f"Embedded Themes: {', '.join(all_themes)}")
