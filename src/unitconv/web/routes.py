"""Starlette route handlers for the converter pages."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, Response
from starlette.routing import BaseRoute, Mount, Route
from starlette.staticfiles import StaticFiles

from unitconv.converter import ConversionRequest
from unitconv.errors import ConverterError, ErrorMapper, TemplateRenderError, UnknownCategoryError
from unitconv.units import DEFAULT_CATEGORY, Category
from unitconv.web.rendering import PageRenderer

logger = logging.getLogger(__name__)

ERROR_PAGE_FALLBACK = "unable to load error page"


def build_routes(
    renderer: PageRenderer,
    *,
    static_dir: str | Path,
    error_mapper: ErrorMapper | None = None,
) -> list[BaseRoute]:
    """Build Starlette routes for the converter.

    Args:
        renderer: PageRenderer used for every page. Shared read-only.
        static_dir: Directory served under ``/files``.
        error_mapper: Maps exceptions to error page messages.

    Returns:
        List of routes: the default form, per-category form and conversion
        endpoints, the static file mount, and a trailing catch-all that
        answers any other path with the "invalid path" error page.
    """
    mapper = error_mapper or ErrorMapper()

    def error_response(error: Exception) -> Response:
        page = mapper.to_error_page(error)
        try:
            return HTMLResponse(renderer.render_error(page.message), status_code=page.status_code)
        except TemplateRenderError:
            logger.exception("Error page could not be rendered")
            return PlainTextResponse(ERROR_PAGE_FALLBACK, status_code=500)

    def render_page(render: Callable[[], str]) -> Response:
        try:
            return HTMLResponse(render())
        except TemplateRenderError as exc:
            return error_response(exc)

    async def default_form(request: Request) -> Response:
        return render_page(lambda: renderer.render_form(DEFAULT_CATEGORY))

    async def category_form(request: Request) -> Response:
        name = request.path_params["category"]
        try:
            category = Category.parse(name)
        except ConverterError as exc:
            logger.warning("Rejected form request for %r: %s", name, exc.message)
            return error_response(exc)
        return render_page(lambda: renderer.render_form(category))

    async def convert(request: Request) -> Response:
        name = request.path_params["category"]
        try:
            category = Category.parse(name)
            async with request.form() as form:
                conversion = ConversionRequest.from_form(category, form)
            result = conversion.execute()
        except ConverterError as exc:
            logger.warning("Rejected conversion on /%s: %s", name, exc.message)
            return error_response(exc)
        return render_page(lambda: renderer.render_result(result))

    async def unknown_path(request: Request) -> Response:
        path = request.path_params["path"]
        logger.warning("Rejected request for unknown path /%s", path)
        return error_response(UnknownCategoryError(path))

    return [
        Route("/", endpoint=default_form, methods=["GET"]),
        Mount("/files", app=StaticFiles(directory=str(static_dir)), name="files"),
        Route("/{category}", endpoint=category_form, methods=["GET"]),
        Route("/{category}", endpoint=convert, methods=["POST"]),
        Route("/{path:path}", endpoint=unknown_path, methods=["GET", "POST"]),
    ]
