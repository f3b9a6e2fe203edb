"""
Integration tests for the full build: resume data -> themes -> template -> CSS -> dist/index.html.
"""

import json

import pytest

from conftest import (
    FAILING_CSS,
    RESUME_JSON,
    RESUME_YAML,
    STYLESHEET_LINK,
    make_config,
    write_project,
)
from vitae.contexts.rendering import build_resume, render_html


@pytest.mark.integration
def test_build_writes_self_contained_page(project):
    config = make_config(project)

    result = build_resume(config)

    assert result.success, result.error
    assert result.output_path == project / "dist" / "index.html"

    html = result.output_path.read_text(encoding="utf-8")
    assert STYLESHEET_LINK not in html
    assert "<style>/* compiled */body { color: var(--text); }\n/* prefixed */</style>" in html
    assert "<h1>A</h1>" in html
    assert "<li>Python</li><li>SQL</li>" in html
    assert "name-is-string" in html
    assert "theme-is-object" in html
    assert "skills-is-array" in html
    assert result.size_bytes == len(html.encode("utf-8"))


@pytest.mark.integration
def test_all_themes_embedded(project):
    result = build_resume(make_config(project))
    html = result.output_path.read_text(encoding="utf-8")

    embedded = html.split("const themes = ", 1)[1].split(";</script>", 1)[0]
    assert json.loads(embedded) == {
        "dark": {"name": "Dark", "text": "#eee"},
        "light": {"name": "Light", "text": "#111"},
    }
    assert result.theme_names == ["dark", "light"]


@pytest.mark.integration
def test_yaml_and_json_sources_render_identically(tmp_path):
    yaml_root = write_project(tmp_path / "yaml", resume_yaml=RESUME_YAML)
    json_root = write_project(tmp_path / "json", resume_yaml=None, resume_json=RESUME_JSON)

    yaml_html, _ = render_html(make_config(yaml_root))
    json_html, _ = render_html(make_config(json_root))

    assert yaml_html == json_html


@pytest.mark.integration
def test_first_listed_theme_is_default(project):
    result = build_resume(make_config(project))

    assert result.current_theme == "dark"
    assert result.current_theme_name == "Dark"
    html = result.output_path.read_text(encoding="utf-8")
    assert 'data-theme="dark"' in html


@pytest.mark.integration
def test_theme_preference_applies(project):
    result = build_resume(make_config(project, theme="light"))

    assert result.current_theme == "light"


@pytest.mark.integration
def test_default_theme_file_beats_preference(tmp_path):
    themes = {
        "aaa": {"name": "First"},
        "default-theme": {"name": "Chosen"},
        "zzz": {"name": "Last"},
    }
    root = write_project(tmp_path, themes=themes)

    result = build_resume(make_config(root, theme="aaa"))

    assert result.current_theme == "default-theme"
    assert result.current_theme_name == "Chosen"


@pytest.mark.integration
def test_unnamed_theme_is_shown_by_key(tmp_path):
    root = write_project(tmp_path, themes={"plain": {"text": "#000"}})

    result = build_resume(make_config(root))

    assert result.current_theme_name == "plain"


@pytest.mark.integration
def test_empty_themes_directory_writes_nothing(tmp_path):
    root = write_project(tmp_path, themes={})

    result = build_resume(make_config(root))

    assert result.success is False
    assert "No themes found" in result.error
    assert not (root / "dist" / "index.html").exists()


@pytest.mark.integration
def test_missing_resume_fails(tmp_path):
    root = write_project(tmp_path, resume_yaml=None)

    result = build_resume(make_config(root))

    assert result.success is False
    assert "Resume file not found" in result.error
    assert not (root / "dist").exists()


@pytest.mark.integration
def test_css_failure_writes_nothing(project):
    result = build_resume(make_config(project, css_compiler=FAILING_CSS))

    assert result.success is False
    assert "CSS processing failed" in result.error
    assert not (project / "dist" / "index.html").exists()


@pytest.mark.integration
def test_template_without_link_still_builds(tmp_path):
    root = write_project(tmp_path, template="<p>{{ name }}</p>\n")

    result = build_resume(make_config(root))

    assert result.success
    assert result.output_path.read_text(encoding="utf-8") == "<p>A</p>\n"


@pytest.mark.integration
def test_rebuild_overwrites_output(project):
    config = make_config(project)
    build_resume(config)
    (project / "resume.yaml").write_text("name: B\n", encoding="utf-8")

    result = build_resume(config)

    assert "<h1>B</h1>" in result.output_path.read_text(encoding="utf-8")
