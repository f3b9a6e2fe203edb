"""
Theme Loading

Themes are JSON documents stored one per file in the themes directory. A theme's
name is its file stem (themes/dark.json -> "dark").
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from vitae.contexts.loading.exceptions import (
    ThemeNotFoundError,
    ThemeParseError,
    ThemesDirectoryNotFoundError,
)
from vitae.contexts.loading.logger import _log_debug, _log_info

THEME_EXTENSION = ".json"


def _theme_files(themes_dir: Path) -> List[Path]:
    """Theme files in listing order (sorted by file name)."""
    if not themes_dir.is_dir():
        raise ThemesDirectoryNotFoundError(themes_dir)
    return sorted(
        (path for path in themes_dir.iterdir() if path.is_file() and path.suffix == THEME_EXTENSION),
        key=lambda path: path.name,
    )


def list_theme_names(themes_dir: Path) -> List[str]:
    """
    Names of all themes available in a directory.

    Returns an empty list when the directory does not exist.
    """
    if not themes_dir.is_dir():
        return []
    return [path.stem for path in _theme_files(themes_dir)]


def _read_theme_file(theme_path: Path) -> Dict[str, Any]:
    try:
        theme = json.loads(theme_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ThemeParseError(theme_path, e) from e

    if not isinstance(theme, dict):
        raise ThemeParseError(theme_path, ValueError("theme must be a JSON object"))
    return theme


def load_theme(themes_dir: Path, theme_name: str) -> Dict[str, Any]:
    """
    Load a single theme by name.

    Args:
        themes_dir: Directory containing theme JSON files
        theme_name: Theme name (file stem)

    Returns:
        Parsed theme mapping

    Raises:
        ThemeNotFoundError: If themes_dir/<theme_name>.json does not exist
            (message lists the available theme names)
        ThemeParseError: If the file is not valid JSON
    """
    theme_path = themes_dir / f"{theme_name}{THEME_EXTENSION}"

    if not theme_path.is_file():
        raise ThemeNotFoundError(theme_path, list_theme_names(themes_dir))

    _log_info(f"Using theme: {theme_name}")
    return _read_theme_file(theme_path)


def load_all_themes(themes_dir: Path) -> Dict[str, Dict[str, Any]]:
    """
    Load every theme in a directory.

    The returned dict preserves listing order, which the default theme
    selection falls back on. Any unreadable theme aborts the whole load.

    Raises:
        ThemesDirectoryNotFoundError: If themes_dir does not exist
        ThemeParseError: If any theme file is not valid JSON
    """
    themes = {}
    for theme_path in _theme_files(themes_dir):
        themes[theme_path.stem] = _read_theme_file(theme_path)
        _log_debug(f"Loaded theme: {theme_path.stem}")

    return themes
