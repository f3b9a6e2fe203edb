"""
Loading context logger.

Provides logging interface for loading context with automatic [load] prefix.
All loading modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[load]"


def _log_info(message: str) -> None:
    """Log info message with [load] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [load] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [load] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
