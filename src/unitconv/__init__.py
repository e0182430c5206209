"""unitconv: web form converter for distance, weight and temperature units."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from unitconv.config import AppConfig
from unitconv.converter import ConversionRequest, ConversionResult, convert, format_number
from unitconv.errors import (
    ConverterError,
    ErrorMapper,
    MissingInputError,
    TemplateRenderError,
    UnknownCategoryError,
    UnknownUnitError,
    UnparseableInputError,
)
from unitconv.server.factory import create_app
from unitconv.server.transport import TransportManager
from unitconv.units import Category, TemperatureUnit
from unitconv.web.rendering import PageRenderer

__all__ = [
    # Public API
    "serve",
    "create_app",
    "convert",
    # Building blocks
    "AppConfig",
    "ConversionRequest",
    "ConversionResult",
    "PageRenderer",
    "TransportManager",
    "format_number",
    # Units
    "Category",
    "TemperatureUnit",
    # Errors
    "ConverterError",
    "ErrorMapper",
    "MissingInputError",
    "UnparseableInputError",
    "UnknownUnitError",
    "UnknownCategoryError",
    "TemplateRenderError",
]

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def serve(
    config: AppConfig | None = None,
    *,
    on_startup: Callable[[], None] | None = None,
    on_shutdown: Callable[[], None] | None = None,
    **overrides: Any,
) -> None:
    """Launch the converter web server. Blocks until shutdown.

    Args:
        config: Startup configuration. Defaults to ``AppConfig()``.
        on_startup: Optional callback invoked after setup, before the server starts.
        on_shutdown: Optional callback invoked after the server stops.
        **overrides: ``AppConfig`` fields (host, port, templates_dir,
            static_dir, log_level) that replace values from ``config``.
    """
    config = (config or AppConfig()).with_overrides(**overrides)
    config.validate()

    logging.getLogger("unitconv").setLevel(getattr(logging, config.log_level.upper()))

    app = create_app(config)
    transport_manager = TransportManager(log_level=config.log_level)

    logger.info("Starting unitconv v%s on %s:%d", __version__, config.host, config.port)

    if on_startup is not None:
        on_startup()

    try:
        asyncio.run(transport_manager.run_http(app, host=config.host, port=config.port))
    finally:
        if on_shutdown is not None:
            on_shutdown()
