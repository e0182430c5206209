"""Tests for TransportManager: HTTP server lifecycle."""

from __future__ import annotations

import inspect
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from unitconv.server.transport import TransportManager


class TestTransportManagerInstantiation:
    def test_transport_manager_instantiation(self) -> None:
        """TransportManager can be instantiated without arguments."""
        tm = TransportManager()
        assert tm is not None

    def test_run_http_is_async(self) -> None:
        assert inspect.iscoroutinefunction(TransportManager().run_http)


class TestValidateHostPort:
    def test_validate_host_port_valid(self) -> None:
        tm = TransportManager()
        # Should not raise
        tm._validate_host_port("127.0.0.1", 8080)

    def test_validate_host_port_empty_host(self) -> None:
        with pytest.raises(ValueError, match="[Hh]ost"):
            TransportManager()._validate_host_port("", 8080)

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_validate_host_port_out_of_range(self, port: int) -> None:
        with pytest.raises(ValueError, match="[Pp]ort"):
            TransportManager()._validate_host_port("127.0.0.1", port)

    def test_validate_host_port_non_int(self) -> None:
        with pytest.raises(ValueError, match="[Pp]ort"):
            TransportManager()._validate_host_port("127.0.0.1", "8080")  # type: ignore[arg-type]


class TestRunHttp:
    @pytest.mark.asyncio
    async def test_runs_app_under_uvicorn(self) -> None:
        app = MagicMock()
        with patch("unitconv.server.transport.uvicorn") as mock_uvicorn:
            mock_uvicorn.Server.return_value.serve = AsyncMock()
            await TransportManager(log_level="DEBUG").run_http(app, host="0.0.0.0", port=9000)

        mock_uvicorn.Config.assert_called_once_with(app, host="0.0.0.0", port=9000, log_level="debug")
        mock_uvicorn.Server.assert_called_once_with(mock_uvicorn.Config.return_value)
        mock_uvicorn.Server.return_value.serve.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_port_does_not_start_server(self) -> None:
        with patch("unitconv.server.transport.uvicorn") as mock_uvicorn:
            with pytest.raises(ValueError):
                await TransportManager().run_http(MagicMock(), port=0)
        mock_uvicorn.Server.assert_not_called()
