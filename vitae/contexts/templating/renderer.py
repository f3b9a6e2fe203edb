"""
Page Template Rendering

Renders the resume page from a single Jinja2 template. The template receives
every top-level resume field plus:

    theme         the selected default theme mapping
    allThemes     every theme, keyed by name (for client-side switching)
    currentTheme  name of the selected default theme
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, TemplateSyntaxError

from vitae.contexts.templating.exceptions import TemplateNotFoundError, TemplateRenderError
from vitae.contexts.templating.helpers import TEMPLATE_HELPERS
from vitae.contexts.templating.logger import _log_debug, _log_info


@dataclass(frozen=True)
class RenderContext:
    """
    Everything the page template is rendered with.

    Attributes:
        resume: Resume data; its keys become top-level template variables
        theme: Selected default theme
        all_themes: Full theme collection
        current_theme: Name of the selected default theme
    """

    resume: Dict[str, Any]
    theme: Dict[str, Any]
    all_themes: Dict[str, Dict[str, Any]]
    current_theme: str

    def as_template_vars(self) -> Dict[str, Any]:
        """Flatten into template variables. Theme keys win over resume keys of the same name."""
        return {
            **self.resume,
            "theme": self.theme,
            "allThemes": self.all_themes,
            "currentTheme": self.current_theme,
        }


class TemplateRenderer:
    """
    Loads the page template and renders it with the resume helpers registered.

    No autoescaping is applied: resume data is trusted input and HTML in it is
    passed through unchanged.
    """

    def __init__(self, template_path: Path):
        """
        Args:
            template_path: Path to the Jinja2 page template
        """
        self.template_path = Path(template_path)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_path.parent)),
            keep_trailing_newline=True,
        )
        self.env.globals.update(TEMPLATE_HELPERS)

    def load_template(self) -> Template:
        """
        Compile the page template.

        Raises:
            TemplateNotFoundError: If the template file doesn't exist
            TemplateRenderError: If the template has Jinja2 syntax errors
        """
        if not self.template_path.is_file():
            raise TemplateNotFoundError(self.template_path)

        try:
            return self.env.get_template(self.template_path.name)
        except TemplateNotFound as e:
            raise TemplateNotFoundError(self.template_path) from e
        except TemplateSyntaxError as e:
            raise TemplateRenderError(
                "Template has syntax errors",
                template_path=self.template_path,
                line_number=e.lineno,
                original_error=e,
            ) from e

    def render(self, context: RenderContext) -> str:
        """
        Render the page template to HTML.

        Raises:
            TemplateRenderError: If rendering fails (undefined call, bad filter, etc.)
        """
        template = self.load_template()
        _log_debug(f"Compiled template: {self.template_path}")

        try:
            html = template.render(context.as_template_vars())
        except Exception as e:
            raise TemplateRenderError(
                "Template rendering failed",
                template_path=self.template_path,
                original_error=e,
            ) from e

        _log_info(f"Rendered template with theme: {context.current_theme}")
        return html


def render_page(template_path: Path, context: RenderContext) -> str:
    """Convenience wrapper: render template_path with context."""
    return TemplateRenderer(template_path).render(context)
