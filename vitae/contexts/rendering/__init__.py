"""
Rendering Context

Responsibilities:
- Runs the stylesheet through the CSS compiler and prefixer
- Inlines the processed CSS into the rendered page
- Writes the self-contained HTML file
- Orchestrates a complete build

Owns: CSS processing, output files, build orchestration
Never: Decides which theme is the default
"""

from vitae.contexts.rendering.builder import BuildResult, build_resume, render_html
from vitae.contexts.rendering.css_pipeline import (
    CssProcessingResult,
    inline_stylesheet,
    process_stylesheet,
    run_css_steps,
)
from vitae.contexts.rendering.output_writer import WrittenFile, write_output

__all__ = [
    "build_resume",
    "render_html",
    "BuildResult",
    "process_stylesheet",
    "run_css_steps",
    "inline_stylesheet",
    "CssProcessingResult",
    "write_output",
    "WrittenFile",
]
