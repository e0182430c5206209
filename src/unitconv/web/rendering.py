"""PageRenderer: pre-parsed Jinja2 templates for the form, result and error pages."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from jinja2 import Environment, FileSystemLoader, Template, TemplateError, select_autoescape

from unitconv.converter import ConversionResult, format_number
from unitconv.errors import TemplateRenderError
from unitconv.units import Category

logger = logging.getLogger(__name__)

PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

FORM_TEMPLATE = "form.html"
RESULT_TEMPLATE = "result.html"
ERROR_TEMPLATE = "error.html"

PAGE_TEMPLATES = (FORM_TEMPLATE, RESULT_TEMPLATE, ERROR_TEMPLATE)


class PageRenderer:
    """Renders the converter's HTML pages.

    Templates are parsed once at construction and never mutated, so a single
    renderer can be shared by concurrent requests.

    Args:
        templates: Mapping of template name to parsed template. Must contain
            the form, result and error templates.
    """

    def __init__(self, templates: Mapping[str, Template]) -> None:
        missing = [name for name in PAGE_TEMPLATES if name not in templates]
        if missing:
            raise ValueError(f"Missing page templates: {', '.join(missing)}")
        self._templates: Mapping[str, Template] = MappingProxyType(dict(templates))

    @classmethod
    def from_directory(cls, directory: str | Path) -> PageRenderer:
        """Load and parse the page templates from ``directory``.

        Raises:
            TemplateRenderError: If a template is missing or fails to parse.
        """
        env = Environment(
            loader=FileSystemLoader(str(directory)),
            autoescape=select_autoescape(enabled_extensions=("html", "xml"), default=True),
        )
        templates: dict[str, Template] = {}
        for name in PAGE_TEMPLATES:
            try:
                templates[name] = env.get_template(name)
            except TemplateError as exc:
                raise TemplateRenderError(name, str(exc)) from exc
        logger.debug("Loaded %d templates from %s", len(templates), directory)
        return cls(templates)

    @classmethod
    def default(cls) -> PageRenderer:
        """Renderer over the templates shipped with the package."""
        return cls.from_directory(PACKAGE_TEMPLATES_DIR)

    def _render(self, name: str, **context: Any) -> str:
        try:
            return self._templates[name].render(categories=list(Category), **context)
        except (TemplateError, TypeError, ValueError, AttributeError, ArithmeticError) as exc:
            logger.error("Rendering %s failed: %s", name, exc)
            raise TemplateRenderError(name, str(exc)) from exc

    def render_form(self, category: Category) -> str:
        """Input form listing every unit of ``category`` as a selectable option."""
        return self._render(FORM_TEMPLATE, page=category.value, category=category)

    def render_result(self, result: ConversionResult) -> str:
        """Result page showing the converted value in the target unit."""
        request = result.request
        return self._render(
            RESULT_TEMPLATE,
            page=request.category.value,
            category=request.category,
            num=result.display_value,
            to_unit=request.to_unit,
            from_unit=request.from_unit,
            source_value=format_number(request.value),
        )

    def render_error(self, message: str) -> str:
        return self._render(ERROR_TEMPLATE, page="error", message=message)
