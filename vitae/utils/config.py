"""
Build configuration.

All settings are read from the environment (after loading a `.env` file) exactly
once, at process start, into an immutable BuildConfig that is passed to each
pipeline step.

Environment variables:
    VITAE_ROOT    Project root holding resume data, themes/ and src/ (default: cwd)
    RESUME_FILE   Explicit resume path; `.yaml` or `.json` restricts the lookup to that file
    THEME         Preferred default theme (ignored when themes/default-theme.json exists)
    CSS_COMPILER  Utility-CSS compiler command (reads CSS on stdin, writes CSS on stdout)
    CSS_PREFIXER  Vendor-prefixer command (same stdin/stdout contract)
    LOGS_PATH     Directory for log files (console only when unset)
"""

import os
import shlex
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from vitae.utils.exceptions import ConfigError

DEFAULT_CSS_COMPILER = "npx @tailwindcss/cli --input - --output -"
DEFAULT_CSS_PREFIXER = "npx postcss --use autoprefixer"

# Stylesheet reference in the template that gets replaced by the inlined CSS
STYLESHEET_LINK = '<link rel="stylesheet" href="./style.css">'


def _optional_path(value: Optional[str]) -> Optional[Path]:
    return Path(value) if value else None


def _command_setting(name: str, default: str) -> Tuple[str, ...]:
    """Split a command from the environment; unset or blank falls back to default."""
    value = os.getenv(name) or ""
    try:
        command = tuple(shlex.split(value))
    except ValueError as e:
        raise ConfigError(name, value, str(e)) from e
    return command or tuple(shlex.split(default))


def load_environment(root: Optional[Path] = None) -> Path:
    """
    Load `.env` files and resolve the project root.

    The `.env` nearest the working directory is loaded first, then the one in the
    project root. Variables already set in the environment are never overridden.

    Args:
        root: Project root override (takes precedence over VITAE_ROOT)

    Returns:
        Absolute project root
    """
    load_dotenv(find_dotenv(usecwd=True))

    if root is None:
        root = Path(os.getenv("VITAE_ROOT") or Path.cwd())
    root = Path(root).resolve()

    load_dotenv(root / ".env")
    return root


@dataclass(frozen=True)
class BuildConfig:
    """
    Immutable settings for one build invocation.

    Attributes:
        root: Project root directory
        resume_file: Explicit resume path from RESUME_FILE (None for default lookup)
        theme: Theme name from THEME (None when unset)
        css_compiler: Compiler command as an argument list
        css_prefixer: Prefixer command as an argument list
        logs_path: Base directory for log files (None for console only)
    """

    root: Path
    resume_file: Optional[Path] = None
    theme: Optional[str] = None
    css_compiler: Tuple[str, ...] = tuple(shlex.split(DEFAULT_CSS_COMPILER))
    css_prefixer: Tuple[str, ...] = tuple(shlex.split(DEFAULT_CSS_PREFIXER))
    logs_path: Optional[Path] = None

    @classmethod
    def from_env(cls, root: Optional[Path] = None) -> "BuildConfig":
        """
        Build configuration from environment variables and `.env`.

        Args:
            root: Project root override (takes precedence over VITAE_ROOT)

        Raises:
            ConfigError: If a CSS command has unbalanced quotes
        """
        root = load_environment(root)

        return cls(
            root=root,
            resume_file=_optional_path(os.getenv("RESUME_FILE")),
            theme=os.getenv("THEME") or None,
            css_compiler=_command_setting("CSS_COMPILER", DEFAULT_CSS_COMPILER),
            css_prefixer=_command_setting("CSS_PREFIXER", DEFAULT_CSS_PREFIXER),
            logs_path=_optional_path(os.getenv("LOGS_PATH")),
        )

    def with_overrides(self, **changes) -> "BuildConfig":
        """Return a copy with the given fields replaced (None values are ignored)."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})

    @property
    def default_yaml_path(self) -> Path:
        return self.root / "resume.yaml"

    @property
    def default_json_path(self) -> Path:
        return self.root / "resume.json"

    @property
    def themes_dir(self) -> Path:
        return self.root / "themes"

    @property
    def template_path(self) -> Path:
        return self.root / "src" / "template.html.jinja"

    @property
    def stylesheet_path(self) -> Path:
        return self.root / "src" / "style.css"

    @property
    def output_dir(self) -> Path:
        return self.root / "dist"

    @property
    def output_path(self) -> Path:
        return self.output_dir / "index.html"

    @property
    def build_dir(self) -> Path:
        return self.root / "build"

    def resolve(self, path: Path) -> Path:
        """Resolve a possibly relative path against the project root."""
        path = Path(path)
        return path if path.is_absolute() else self.root / path
