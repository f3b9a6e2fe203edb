"""Exceptions raised while processing CSS and writing the build artifact."""

from pathlib import Path
from typing import List, Optional

from vitae.utils.exceptions import VitaeError


class StylesheetNotFoundError(VitaeError):
    """Raised when the source stylesheet does not exist."""

    def __init__(self, stylesheet_path: Path):
        self.stylesheet_path = stylesheet_path
        super().__init__(f"Stylesheet not found: {stylesheet_path}")


class CssProcessingError(VitaeError):
    """
    Raised when a CSS pipeline step fails.

    Attributes:
        errors: Error lines collected from the failing step
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("CSS processing failed:\n" + "\n".join(f"  {err}" for err in self.errors))


class OutputWriteError(VitaeError):
    """Raised when the output directory cannot be created or the HTML cannot be written."""

    def __init__(self, path: Path, original_error: Optional[Exception] = None):
        self.path = path
        self.original_error = original_error
        super().__init__(f"Could not write {path}: {original_error}")
