"""
Default Theme Selection

The default theme is the one shown when the page first loads. Precedence:
    1. a theme named "default-theme" (themes/default-theme.json)
    2. the theme named by the THEME environment variable, if it exists
    3. the first theme in listing order
"""

from pathlib import Path
from typing import Any, Dict, Optional

from vitae.contexts.loading.exceptions import NoThemesError
from vitae.contexts.loading.logger import _log_debug, _log_warning

DEFAULT_THEME_NAME = "default-theme"


def select_default_theme(
    themes: Dict[str, Dict[str, Any]],
    preferred: Optional[str] = None,
    themes_dir: Optional[Path] = None,
) -> str:
    """
    Choose the default theme name from a theme collection.

    Args:
        themes: Theme collection in listing order
        preferred: Theme requested through the environment (may be None)
        themes_dir: Only used in the error message

    Returns:
        Name of the selected theme

    Raises:
        NoThemesError: If the collection is empty
    """
    if DEFAULT_THEME_NAME in themes:
        if preferred and preferred != DEFAULT_THEME_NAME:
            _log_debug(f"{DEFAULT_THEME_NAME} overrides THEME={preferred}")
        return DEFAULT_THEME_NAME

    if preferred and preferred in themes:
        return preferred

    if not themes:
        raise NoThemesError(themes_dir)

    if preferred:
        _log_warning(f"Theme '{preferred}' not found, falling back to first available theme")

    return next(iter(themes))
