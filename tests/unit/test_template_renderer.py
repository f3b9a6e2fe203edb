"""Unit tests for TemplateRenderer and RenderContext."""

from pathlib import Path

import pytest

from vitae.contexts.templating.exceptions import TemplateNotFoundError, TemplateRenderError
from vitae.contexts.templating.renderer import RenderContext, TemplateRenderer, render_page

THEME = {"name": "T", "color": "#fff"}
STARTER_TEMPLATE = Path(__file__).resolve().parents[2] / "starter" / "src" / "template.html.jinja"


def make_context(**resume):
    resume = resume or {"name": "A"}
    return RenderContext(
        resume=resume,
        theme=THEME,
        all_themes={"t": THEME},
        current_theme="t",
    )


def write_template(tmp_path, source):
    path = tmp_path / "template.html.jinja"
    path.write_text(source, encoding="utf-8")
    return path


@pytest.mark.unit
def test_context_spreads_resume_and_adds_theme_keys():
    context = make_context(name="A", summary="Hi")

    assert context.as_template_vars() == {
        "name": "A",
        "summary": "Hi",
        "theme": THEME,
        "allThemes": {"t": THEME},
        "currentTheme": "t",
    }


@pytest.mark.unit
def test_theme_keys_override_resume_fields():
    context = make_context(name="A", theme="resume-value")

    assert context.as_template_vars()["theme"] == THEME


@pytest.mark.unit
def test_helpers_callable_from_template(tmp_path):
    template = write_template(
        tmp_path,
        "{{ isString(name) }} {{ isString(theme) }} {{ isObject(theme) }} "
        "{{ isObject(name) }} {{ isArray(allThemes) }} {{ json(theme) }}",
    )

    html = render_page(template, make_context())

    assert html == 'True False True False False {"name":"T","color":"#fff"}'


@pytest.mark.unit
def test_no_autoescaping(tmp_path):
    template = write_template(tmp_path, "<p>{{ name }}</p>")

    html = render_page(template, make_context(name="<b>A & B</b>"))

    assert html == "<p><b>A & B</b></p>"


@pytest.mark.unit
def test_missing_fields_render_empty(tmp_path):
    template = write_template(tmp_path, "[{{ nickname }}]")

    assert render_page(template, make_context()) == "[]"


@pytest.mark.unit
def test_trailing_newline_kept(tmp_path):
    template = write_template(tmp_path, "{{ currentTheme }}\n")

    assert render_page(template, make_context()) == "t\n"


@pytest.mark.unit
def test_missing_template(tmp_path):
    renderer = TemplateRenderer(tmp_path / "nope.html.jinja")

    with pytest.raises(TemplateNotFoundError):
        renderer.render(make_context())


@pytest.mark.unit
def test_syntax_error_reports_line(tmp_path):
    template = write_template(tmp_path, "<p>\n{% if name %}\n</p>\n")

    with pytest.raises(TemplateRenderError) as exc_info:
        render_page(template, make_context())

    assert exc_info.value.template_path == template
    assert exc_info.value.line_number is not None


@pytest.mark.unit
def test_runtime_error_wrapped(tmp_path):
    template = write_template(tmp_path, "{{ name.upper(1, 2, 3) }}")

    with pytest.raises(TemplateRenderError, match="rendering failed"):
        render_page(template, make_context())


@pytest.mark.unit
def test_starter_template_handles_non_string_contact_values():
    context = make_context(
        name="A",
        contact={"phone": 5551234, "site": "https://a.example.com", "email": "a@example.com"},
    )

    html = render_page(STARTER_TEMPLATE, context)

    assert "<li>5551234</li>" in html
    assert '<a href="https://a.example.com">' in html
    assert '<a href="mailto:a@example.com">' in html
