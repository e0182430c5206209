"""Tests for PageRenderer."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import Template

from tests.conftest import BROKEN_TEMPLATE, MINIMAL_TEMPLATES, write_templates
from unitconv.converter import ConversionRequest
from unitconv.errors import TemplateRenderError
from unitconv.units import Category
from unitconv.web.rendering import PageRenderer


def _result(value: float, from_unit: str, to_unit: str, category: Category):
    return ConversionRequest(value, from_unit, to_unit, category).execute()


class TestPackagedTemplates:
    @pytest.mark.parametrize("category", list(Category))
    def test_form_lists_every_unit(self, renderer: PageRenderer, category: Category) -> None:
        html = renderer.render_form(category)
        for unit in category.units:
            assert f'<option value="{unit}">{unit}</option>' in html
        assert f'action="/{category.value}"' in html
        assert 'name="num"' in html
        assert 'name="from"' in html
        assert 'name="to"' in html

    def test_form_links_to_every_category(self, renderer: PageRenderer) -> None:
        html = renderer.render_form(Category.WEIGHT)
        for category in Category:
            assert f'href="/{category.value}"' in html

    def test_result_shows_value_in_target_unit(self, renderer: PageRenderer) -> None:
        html = renderer.render_result(_result(1000, "gram", "kilogram", Category.WEIGHT))
        assert '<span id="result">1</span> kilogram' in html
        assert "1000 gram" in html
        assert "Weight" in html

    def test_error_shows_message(self, renderer: PageRenderer) -> None:
        html = renderer.render_error("please enter a value")
        assert '<p id="message">please enter a value</p>' in html

    def test_error_message_is_escaped(self, renderer: PageRenderer) -> None:
        html = renderer.render_error("<script>alert(1)</script>")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestFromDirectory:
    def test_loads_custom_templates(self, minimal_templates_dir: Path) -> None:
        renderer = PageRenderer.from_directory(minimal_templates_dir)
        assert renderer.render_form(Category.WEIGHT) == (
            "FORM Weight:[milligram][gram][kilogram][ounce][pound]"
        )
        assert renderer.render_error("nope") == "ERROR nope"

    def test_missing_template_fails_at_load(self, tmp_path: Path) -> None:
        write_templates(tmp_path)
        (tmp_path / "result.html").unlink()
        with pytest.raises(TemplateRenderError) as exc_info:
            PageRenderer.from_directory(tmp_path)
        assert exc_info.value.details == {"template": "result.html"}

    def test_syntax_error_fails_at_load(self, tmp_path: Path) -> None:
        write_templates(tmp_path, form="{% if %}")
        with pytest.raises(TemplateRenderError):
            PageRenderer.from_directory(tmp_path)

    def test_render_failure_raises_template_render_error(self, tmp_path: Path) -> None:
        renderer = PageRenderer.from_directory(write_templates(tmp_path, result=BROKEN_TEMPLATE))
        with pytest.raises(TemplateRenderError):
            renderer.render_result(_result(1, "inch", "foot", Category.DISTANCE))


class TestConstruction:
    def test_requires_all_page_templates(self) -> None:
        with pytest.raises(ValueError, match="error.html"):
            PageRenderer(
                {
                    "form.html": Template(MINIMAL_TEMPLATES["form.html"]),
                    "result.html": Template(MINIMAL_TEMPLATES["result.html"]),
                }
            )

    def test_templates_mapping_is_read_only(self, renderer: PageRenderer) -> None:
        with pytest.raises(TypeError):
            renderer._templates["form.html"] = Template("x")  # type: ignore[index]
