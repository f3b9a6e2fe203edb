"""
Build Orchestration

Runs the whole build in one synchronous pass:

    resume data -> themes -> default theme -> template -> CSS -> dist/index.html

Every step raises a VitaeError on failure; build_resume() turns that into a
failed BuildResult so the caller decides how to exit. Nothing is written unless
every earlier step succeeded.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from vitae.contexts.loading import load_all_themes, load_resume_data, select_default_theme
from vitae.contexts.rendering.css_pipeline import build_inlined_css
from vitae.contexts.rendering.logger import _log_error, _log_info, log_build_summary
from vitae.contexts.rendering.output_writer import write_output
from vitae.contexts.templating import RenderContext, render_page
from vitae.utils.config import BuildConfig
from vitae.utils.exceptions import VitaeError


@dataclass
class BuildResult:
    """
    Result of build_resume().

    Attributes:
        success: Whether the page was written
        output_path: Written HTML file (None if failed)
        size_bytes: UTF-8 size of the written page
        current_theme: Key of the selected default theme
        current_theme_name: Display name of that theme (its "name", else the key)
        theme_names: All embedded theme names in listing order
        error: Diagnostic message when the build failed
        time_s: Wall-clock build time
    """

    success: bool
    output_path: Optional[Path] = None
    size_bytes: int = 0
    current_theme: Optional[str] = None
    current_theme_name: Optional[str] = None
    theme_names: List[str] = field(default_factory=list)
    error: Optional[str] = None
    time_s: float = 0.0

    @property
    def size_kb(self) -> float:
        return self.size_bytes / 1024


def render_html(config: BuildConfig) -> tuple[str, RenderContext]:
    """
    Produce the final page HTML (CSS inlined) without writing it.

    Raises:
        VitaeError: From whichever step fails first
    """
    resume_data = load_resume_data(config)

    all_themes = load_all_themes(config.themes_dir)
    theme_name = select_default_theme(all_themes, config.theme, config.themes_dir)

    context = RenderContext(
        resume=resume_data,
        theme=all_themes[theme_name],
        all_themes=all_themes,
        current_theme=theme_name,
    )

    html = render_page(config.template_path, context)
    html = build_inlined_css(html, config)

    return html, context


def build_resume(config: BuildConfig) -> BuildResult:
    """
    Build the self-contained resume page.

    Args:
        config: Build configuration

    Returns:
        BuildResult with the written path and size, or the error message
    """
    _log_info("Building resume...")
    start_time = time.time()

    try:
        html, context = render_html(config)
        written = write_output(html, config.output_path)
    except VitaeError as e:
        _log_error(str(e))
        return BuildResult(success=False, error=str(e), time_s=time.time() - start_time)

    log_build_summary(written.path, written.size_kb, context.theme, context.all_themes)

    return BuildResult(
        success=True,
        output_path=written.path,
        size_bytes=written.size_bytes,
        current_theme=context.current_theme,
        current_theme_name=str(context.theme.get("name") or context.current_theme),
        theme_names=list(context.all_themes),
        time_s=time.time() - start_time,
    )
