"""Custom exceptions for templating context with template references."""

from pathlib import Path
from typing import Optional

from vitae.utils.exceptions import VitaeError


class TemplateNotFoundError(VitaeError):
    """Raised when the page template file does not exist."""

    def __init__(self, template_path: Path):
        self.template_path = template_path
        super().__init__(f"Template not found: {template_path}")


class TemplateRenderError(VitaeError):
    """
    Exception raised when template compilation or rendering fails.

    Attributes:
        message: Error description
        template_path: Path to the template file
        line_number: Template line reported by Jinja2, when known
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_path: Optional[Path] = None,
        line_number: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_path = template_path
        self.line_number = line_number
        self.original_error = original_error

        # Build enhanced error message
        parts = [message]

        if template_path:
            location = f"{template_path}:{line_number}" if line_number else f"{template_path}"
            parts.append(f"Template: {location}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
