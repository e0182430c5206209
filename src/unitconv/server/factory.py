"""create_app: build the converter's Starlette application."""

from __future__ import annotations

import logging
import time as _time

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from unitconv.config import AppConfig
from unitconv.units import Category
from unitconv.web.rendering import PageRenderer
from unitconv.web.routes import build_routes

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig | None = None,
    *,
    renderer: PageRenderer | None = None,
) -> Starlette:
    """Create the ASGI application.

    Every piece of shared state (parsed templates, unit tables) is built
    here, before the first request.

    Args:
        config: Startup configuration. Defaults to ``AppConfig()``.
        renderer: Pre-built renderer. When omitted, templates are loaded from
            ``config.templates_dir`` (or the packaged templates).

    Returns:
        A Starlette application serving the converter pages, ``/files`` and
        ``/health``.
    """
    config = config or AppConfig()
    if renderer is None:
        renderer = PageRenderer.from_directory(config.resolved_templates_dir)

    start_time = _time.monotonic()

    async def _health(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "status": "ok",
                "uptime_seconds": round(_time.monotonic() - start_time, 1),
                "categories": [category.value for category in Category],
            }
        )

    routes = [Route("/health", endpoint=_health, methods=["GET"])]
    routes.extend(build_routes(renderer, static_dir=config.resolved_static_dir))

    logger.info(
        "Created converter app with %d routes (static=%s)",
        len(routes),
        config.resolved_static_dir,
    )
    return Starlette(routes=routes)
