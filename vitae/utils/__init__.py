"""
Shared utilities for vitae.

Common functionality used across contexts:
- Configuration management
- Logger setup
- Base exception type
- Timestamps
"""

from vitae.utils.config import BuildConfig
from vitae.utils.exceptions import ConfigError, VitaeError
from vitae.utils.timestamp import now

__all__ = ["BuildConfig", "ConfigError", "VitaeError", "now"]
