"""
Loading Context

Responsibilities:
- Resolves and parses resume data (YAML or JSON)
- Loads individual themes and whole theme directories
- Selects the default theme

Owns: Resume source resolution, theme collection, default theme precedence
Never: Renders templates or touches output files
"""

from vitae.contexts.loading.resume_loader import (
    JsonSource,
    NotFound,
    YamlSource,
    load_resume_data,
    resolve_resume_source,
)
from vitae.contexts.loading.theme_loader import list_theme_names, load_all_themes, load_theme
from vitae.contexts.loading.theme_selector import DEFAULT_THEME_NAME, select_default_theme

__all__ = [
    # Resume data
    "YamlSource",
    "JsonSource",
    "NotFound",
    "resolve_resume_source",
    "load_resume_data",
    # Themes
    "list_theme_names",
    "load_theme",
    "load_all_themes",
    "DEFAULT_THEME_NAME",
    "select_default_theme",
]
