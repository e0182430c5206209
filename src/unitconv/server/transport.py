"""TransportManager: HTTP server lifecycle for the converter app."""

from __future__ import annotations

import logging
from typing import Any

import uvicorn

logger = logging.getLogger(__name__)


class TransportManager:
    """Runs an ASGI application under uvicorn."""

    def __init__(self, log_level: str = "info") -> None:
        self._log_level = log_level.lower()

    async def run_http(self, app: Any, host: str = "127.0.0.1", port: int = 8080) -> None:
        """Serve ``app`` over HTTP. Blocks until the server shuts down."""
        self._validate_host_port(host, port)
        logger.info("Starting HTTP transport on %s:%d", host, port)

        config = uvicorn.Config(app, host=host, port=port, log_level=self._log_level)
        server = uvicorn.Server(config)
        await server.serve()

    def _validate_host_port(self, host: str, port: int) -> None:
        """Validate host and port parameters."""
        if not host:
            raise ValueError("Host must not be empty")
        if not isinstance(port, int) or port < 1 or port > 65535:
            raise ValueError(f"Port must be between 1 and 65535, got {port}")
