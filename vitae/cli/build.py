"""
Resume Build CLI

Builds the self-contained resume page and stages it for deployment.

Commands:
    run    - Render resume data and themes into dist/index.html
    stage  - Copy dist/ into build/ for deployment
    themes - List available themes
    theme  - Print one theme

Examples:\n

    vitae-build run                              # Build from the current directory

    vitae-build run --theme dark                 # Prefer the "dark" theme

    vitae-build run --resume cv/resume.json      # Use a specific resume file

    vitae-build stage                            # Copy dist/ into build/
"""

import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
from typing_extensions import Annotated

from vitae.contexts.deployment import stage_build
from vitae.contexts.deployment.logger import setup_deployment_logger
from vitae.contexts.loading import list_theme_names, load_theme
from vitae.contexts.rendering import build_resume
from vitae.contexts.rendering.logger import setup_rendering_logger
from vitae.utils.config import BuildConfig
from vitae.utils.exceptions import VitaeError
from vitae.utils.logger import session_log_dir


def display_path(path: Path, root: Path) -> str:
    """Return path relative to the project root for cleaner display."""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    typer.secho(f"Error: {message}\n", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def load_config(root: Optional[Path]) -> BuildConfig:
    """Read settings from the environment, exiting on a bad value."""
    try:
        return BuildConfig.from_env(root)
    except VitaeError as e:
        fail(str(e))


RootOption = Annotated[
    Optional[Path],
    typer.Option(
        "--root",
        "-r",
        help="Project root with resume data, themes/ and src/ (default: VITAE_ROOT or cwd)",
        file_okay=False,
    ),
]


app = typer.Typer(
    help="Build a self-contained HTML resume from resume data and themes",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("run")
def run_command(
    root: RootOption = None,
    resume_file: Annotated[
        Optional[Path],
        typer.Option(
            "--resume",
            help="Resume file (.yaml or .json, relative to the project root); overrides RESUME_FILE",
        ),
    ] = None,
    theme: Annotated[
        Optional[str],
        typer.Option(
            "--theme",
            "-t",
            help="Preferred default theme; overrides THEME (default-theme.json still wins)",
        ),
    ] = None,
):
    """
    Build dist/index.html with all themes embedded and CSS inlined.

    Examples:\n

        $ vitae-build run

        $ vitae-build run --root ~/cv --theme dark
    """
    config = load_config(root).with_overrides(resume_file=resume_file, theme=theme)
    setup_rendering_logger(session_log_dir(config.logs_path, "build"), config)

    result = build_resume(config)

    typer.echo("")
    if not result.success:
        fail(result.error)

    typer.secho("✓ Resume built successfully", fg=typer.colors.GREEN, bold=True)
    typer.echo(
        f"  Output: {display_path(result.output_path, config.root)} ({result.size_kb:.1f} KB)"
    )
    typer.echo(f"  Default theme: {result.current_theme_name}")
    typer.echo(f"  Embedded themes: {', '.join(result.theme_names)}")
    typer.echo("")


@app.command("stage")
def stage_command(root: RootOption = None):
    """
    Copy the built page from dist/ into build/ (build/ is emptied first).

    Examples:\n

        $ vitae-build stage
    """
    config = load_config(root)
    setup_deployment_logger(session_log_dir(config.logs_path, "stage"), phase="stage")

    try:
        staged = stage_build(config.output_dir, config.build_dir)
    except VitaeError as e:
        fail(str(e))

    typer.secho(
        f"✓ Staged {len(staged)} file(s) into {display_path(config.build_dir, config.root)}",
        fg=typer.colors.GREEN,
        bold=True,
    )
    for path in staged:
        typer.echo(f"  - {path}")


@app.command("themes")
def themes_command(root: RootOption = None):
    """
    List available themes in listing order.

    Examples:\n

        $ vitae-build themes
    """
    config = load_config(root)
    names = list_theme_names(config.themes_dir)

    if not names:
        fail(f"No themes found in {config.themes_dir}")

    for name in names:
        typer.echo(name)


@app.command("theme")
def theme_command(
    name: Annotated[str, typer.Argument(help="Theme name (file stem in themes/)")],
    root: RootOption = None,
):
    """
    Print one theme as JSON.

    Examples:\n

        $ vitae-build theme default-theme
    """
    config = load_config(root)

    try:
        theme = load_theme(config.themes_dir, name)
    except VitaeError as e:
        fail(str(e))

    typer.echo(json.dumps(theme, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
