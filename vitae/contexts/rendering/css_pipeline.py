"""
CSS Processing Module

Runs the source stylesheet through the utility-CSS compiler and then the
vendor prefixer, and inlines the result into the rendered page.

Each step is an external command that reads CSS on stdin and writes CSS on
stdout. Steps always run in the same order: compiler, then prefixer.
"""

import subprocess
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from vitae.contexts.rendering.exceptions import CssProcessingError, StylesheetNotFoundError
from vitae.contexts.rendering.logger import _log_debug, _log_info, log_css_result
from vitae.utils.config import STYLESHEET_LINK, BuildConfig


@dataclass
class CssProcessingResult:
    """
    Result of running the CSS pipeline.

    Attributes:
        success: Whether every step succeeded
        css: Final CSS text (empty if failed)
        stderr: Combined standard error from all steps that ran
        errors: Error messages from the failing step
        steps_run: Names of the steps that were started
    """

    success: bool
    css: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)
    steps_run: List[str] = field(default_factory=list)


def css_steps(config: BuildConfig) -> List[Tuple[str, Sequence[str]]]:
    """Named pipeline steps in their fixed order."""
    return [
        ("compiler", config.css_compiler),
        ("prefixer", config.css_prefixer),
    ]


def run_css_steps(
    css_input: str,
    steps: Sequence[Tuple[str, Sequence[str]]],
    cwd: Optional[Path] = None,
) -> CssProcessingResult:
    """
    Pipe CSS through each step in order.

    Pure pipeline function: never raises for tool failures, reports them in
    the result instead.

    Args:
        css_input: Source CSS text
        steps: (name, command) pairs; each command reads stdin and writes stdout
        cwd: Working directory for the tools (the project root, so the
            compiler can scan templates for utility classes)

    Returns:
        CssProcessingResult with the final CSS or the failing step's errors
    """
    css = css_input
    all_stderr = []
    steps_run = []

    for name, command in steps:
        steps_run.append(name)
        if not command:
            return CssProcessingResult(
                success=False,
                stderr="\n".join(all_stderr),
                errors=[f"CSS {name} command is empty"],
                steps_run=steps_run,
            )

        _log_debug(f"Running CSS {name}: {' '.join(command)}")

        try:
            result = subprocess.run(
                list(command),
                input=css,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            return CssProcessingResult(
                success=False,
                stderr="\n".join(all_stderr),
                errors=[f"CSS {name} could not be started ({command[0]}): {e}"],
                steps_run=steps_run,
            )

        if result.stderr:
            all_stderr.append(result.stderr)

        if result.returncode != 0:
            errors = [f"CSS {name} exited with status {result.returncode}"]
            errors.extend(line for line in result.stderr.splitlines() if line.strip())
            return CssProcessingResult(
                success=False,
                stderr="\n".join(all_stderr),
                errors=errors,
                steps_run=steps_run,
            )

        css = result.stdout

    return CssProcessingResult(
        success=True, css=css, stderr="\n".join(all_stderr), steps_run=steps_run
    )


def process_stylesheet(config: BuildConfig) -> CssProcessingResult:
    """
    Read the project stylesheet and run it through the configured steps.

    Raises:
        StylesheetNotFoundError: If src/style.css is missing
    """
    stylesheet = config.stylesheet_path
    if not stylesheet.is_file():
        raise StylesheetNotFoundError(stylesheet)

    _log_info("Processing CSS...")
    css_input = stylesheet.read_text(encoding="utf-8")

    start_time = time.time()
    result = run_css_steps(css_input, css_steps(config), cwd=config.root)
    log_css_result(result, time.time() - start_time)

    return result


def inline_stylesheet(html: str, css: str, link_tag: str = STYLESHEET_LINK) -> str:
    """
    Replace the first stylesheet link tag with an inline <style> block.

    A page without the link tag is returned unchanged; that is not an error.
    """
    if link_tag not in html:
        _log_debug(f"No {link_tag} in rendered page, CSS not inlined")
        return html
    return html.replace(link_tag, f"<style>{css}</style>", 1)


def build_inlined_css(html: str, config: BuildConfig) -> str:
    """
    Process the stylesheet and inline it into the rendered page.

    Raises:
        StylesheetNotFoundError: If the stylesheet is missing
        CssProcessingError: If a pipeline step fails
    """
    result = process_stylesheet(config)
    if not result.success:
        raise CssProcessingError(result.errors)
    return inline_stylesheet(html, result.css)
