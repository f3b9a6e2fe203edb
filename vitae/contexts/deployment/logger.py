"""
Deployment context logger.

Provides logging interface for deployment context with automatic [deploy] prefix.
All deployment modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[deploy]"


def setup_deployment_logger(log_dir: Optional[Path], phase: str = "deploy") -> Optional[Path]:
    """
    Setup logger for deployment context.

    Args:
        log_dir: Directory for this session (None for console only)
        phase: Phase name for provenance ("stage" or "deploy")
    """
    return _setup_logger(
        context_name="deploy",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


def _log_info(message: str) -> None:
    """Log info message with [deploy] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [deploy] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [deploy] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [deploy] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
