"""Exceptions raised while loading resume data and themes."""

from pathlib import Path
from typing import Iterable, Optional

from vitae.utils.exceptions import VitaeError


class ResumeNotFoundError(VitaeError):
    """
    Raised when no resume source file exists.

    Attributes:
        attempted_paths: Every path that was probed, in order
    """

    def __init__(self, attempted_paths: Iterable[Path]):
        self.attempted_paths = list(attempted_paths)
        joined = " or ".join(str(path) for path in self.attempted_paths)
        super().__init__(f"Resume file not found: {joined}")


class ResumeParseError(VitaeError):
    """
    Raised when a resume file exists but cannot be parsed.

    Attributes:
        path: File that failed to parse
        original_error: Exception raised by the YAML or JSON parser
    """

    def __init__(self, path: Path, original_error: Optional[Exception] = None, message: str = None):
        self.path = path
        self.original_error = original_error
        detail = message or str(original_error)
        super().__init__(f"Error reading resume data from {path}: {detail}")


class ThemeNotFoundError(VitaeError):
    """
    Raised when a named theme file does not exist.

    The message lists the requested path followed by all valid theme names.
    """

    def __init__(self, theme_path: Path, available: Iterable[str]):
        self.theme_path = theme_path
        self.available = list(available)

        parts = [f"Theme not found: {theme_path}", "Available themes:"]
        if self.available:
            parts.extend(f"  - {name}" for name in self.available)
        else:
            parts.append("  (none)")

        super().__init__("\n".join(parts))


class ThemeParseError(VitaeError):
    """Raised when a theme file is not valid JSON. Aborts the whole collection."""

    def __init__(self, theme_path: Path, original_error: Exception):
        self.theme_path = theme_path
        self.original_error = original_error
        super().__init__(f"Error reading theme {theme_path}: {original_error}")


class ThemesDirectoryNotFoundError(VitaeError):
    """Raised when the themes directory is missing."""

    def __init__(self, themes_dir: Path):
        self.themes_dir = themes_dir
        super().__init__(f"Themes directory not found: {themes_dir}")


class NoThemesError(VitaeError):
    """Raised when a theme collection is empty and no default theme can be chosen."""

    def __init__(self, themes_dir: Optional[Path] = None):
        self.themes_dir = themes_dir
        location = f"{themes_dir}" if themes_dir else "themes/ directory"
        super().__init__(f"No themes found in {location}")
