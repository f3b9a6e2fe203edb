"""Shared fixtures: temporary resume projects and stand-in CSS tools."""

import json
import sys
from pathlib import Path
from typing import Dict, Optional

import pytest
from loguru import logger

from vitae.utils.config import BuildConfig

ENV_VARS = [
    "VITAE_ROOT",
    "RESUME_FILE",
    "THEME",
    "CSS_COMPILER",
    "CSS_PREFIXER",
    "LOGS_PATH",
    "DEPLOY_HOST",
    "DEPLOY_PATH",
]

# Stand-ins for the CSS compiler and prefixer: small filters over stdin
PASSTHROUGH_CSS = (sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read())")
COMPILER_CSS = (
    sys.executable,
    "-c",
    "import sys; sys.stdout.write('/* compiled */' + sys.stdin.read())",
)
PREFIXER_CSS = (
    sys.executable,
    "-c",
    "import sys; sys.stdout.write(sys.stdin.read() + '/* prefixed */')",
)
FAILING_CSS = (
    sys.executable,
    "-c",
    "import sys; sys.stderr.write('unknown at-rule @tailwind\\n'); sys.exit(2)",
)

STYLESHEET_LINK = '<link rel="stylesheet" href="./style.css">'

RESUME_YAML = """\
name: A
title: Engineer
skills:
  - Python
  - SQL
contact:
  email: a@example.com
"""

RESUME_JSON = """\
{
  "name": "A",
  "title": "Engineer",
  "skills": ["Python", "SQL"],
  "contact": {"email": "a@example.com"}
}
"""

TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<link rel="stylesheet" href="./style.css">
</head>
<body data-theme="{{ currentTheme }}">
<h1>{{ name }}</h1>
<p>{{ title }}</p>
<ul>{% for skill in skills %}<li>{{ skill }}</li>{% endfor %}</ul>
{% if isString(name) %}<i>name-is-string</i>{% endif %}
{% if isObject(theme) %}<i>theme-is-object</i>{% endif %}
{% if isArray(skills) %}<i>skills-is-array</i>{% endif %}
<script>const themes = {{ json(allThemes) }};</script>
</body>
</html>
"""

STYLESHEET = "body { color: var(--text); }\n"

THEMES = {
    "light": {"name": "Light", "text": "#111"},
    "dark": {"name": "Dark", "text": "#eee"},
}


def write_project(
    root: Path,
    resume_yaml: Optional[str] = RESUME_YAML,
    resume_json: Optional[str] = None,
    themes: Optional[Dict[str, dict]] = None,
    template: str = TEMPLATE,
    stylesheet: Optional[str] = STYLESHEET,
) -> Path:
    """Write a minimal resume project and return its root."""
    (root / "src").mkdir(parents=True, exist_ok=True)
    themes_dir = root / "themes"
    themes_dir.mkdir(exist_ok=True)

    if resume_yaml is not None:
        (root / "resume.yaml").write_text(resume_yaml, encoding="utf-8")
    if resume_json is not None:
        (root / "resume.json").write_text(resume_json, encoding="utf-8")

    for name, theme in (THEMES if themes is None else themes).items():
        (themes_dir / f"{name}.json").write_text(json.dumps(theme), encoding="utf-8")

    (root / "src" / "template.html.jinja").write_text(template, encoding="utf-8")
    if stylesheet is not None:
        (root / "src" / "style.css").write_text(stylesheet, encoding="utf-8")

    return root


def make_config(root: Path, **overrides) -> BuildConfig:
    """BuildConfig for a test project, with stand-in CSS tools."""
    settings = {"css_compiler": COMPILER_CSS, "css_prefixer": PREFIXER_CSS}
    settings.update(overrides)
    return BuildConfig(root=root, **settings)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def project(tmp_path):
    """A complete project with resume.yaml and two themes (light, dark)."""
    return write_project(tmp_path / "site")


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore loguru's default stderr sink after tests that reconfigure it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
