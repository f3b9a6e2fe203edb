"""
Templating Context

Responsibilities:
- Builds the render context from resume data and themes
- Renders the Jinja2 page template
- Provides the template helper predicates (json, isString, isObject, isArray)

Owns: Template loading, helper registration, HTML generation
Never: Processes CSS or writes output files
"""

from vitae.contexts.templating.helpers import (
    TEMPLATE_HELPERS,
    ValueKind,
    is_array,
    is_object,
    is_string,
    to_json,
    value_kind,
)
from vitae.contexts.templating.renderer import RenderContext, TemplateRenderer, render_page

__all__ = [
    "RenderContext",
    "TemplateRenderer",
    "render_page",
    "TEMPLATE_HELPERS",
    "ValueKind",
    "value_kind",
    "to_json",
    "is_string",
    "is_object",
    "is_array",
]
