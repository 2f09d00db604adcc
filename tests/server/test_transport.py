"""Tests for TransportManager."""

from __future__ import annotations

import inspect
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from zuglang_tools.server.app import create_app
from zuglang_tools.server.transport import MCP_PATH, TransportManager


class TestTransportManagerAPI:
    def test_run_methods_are_async(self) -> None:
        tm = TransportManager()
        assert inspect.iscoroutinefunction(tm.run_http)
        assert inspect.iscoroutinefunction(tm.run_stdio)
        assert inspect.iscoroutinefunction(tm.run_streamable_http)

    def test_defaults(self) -> None:
        tm = TransportManager()
        assert (tm.host, tm.port) == ("127.0.0.1", 8000)


class TestAddressValidation:
    def test_empty_host(self) -> None:
        with pytest.raises(ValueError, match="Host must not be empty"):
            TransportManager(host="")

    @pytest.mark.parametrize("port", [0, 65536, -1, True, "8000"])
    def test_bad_port(self, port) -> None:
        with pytest.raises(ValueError, match="Port must be between 1 and 65535"):
            TransportManager(port=port)


class TestRunHttp:
    @pytest.mark.asyncio
    async def test_serves_app_with_uvicorn(self) -> None:
        app = create_app()
        with patch("zuglang_tools.server.transport.uvicorn") as mock_uvicorn:
            mock_uvicorn.Server.return_value.serve = AsyncMock()
            await TransportManager(host="0.0.0.0", port=9001).run_http(app)

        mock_uvicorn.Config.assert_called_once_with(app, host="0.0.0.0", port=9001, log_level="info")
        mock_uvicorn.Server.return_value.serve.assert_awaited_once()


class TestRunStdio:
    @pytest.mark.asyncio
    async def test_runs_server_on_stdio_streams(self) -> None:
        server = MagicMock(spec=["run"])
        server.run = AsyncMock()
        options = MagicMock()
        streams = (MagicMock(), MagicMock())

        stdio_cm = MagicMock()
        stdio_cm.__aenter__ = AsyncMock(return_value=streams)
        stdio_cm.__aexit__ = AsyncMock(return_value=False)

        with patch("zuglang_tools.server.transport.stdio_server", return_value=stdio_cm):
            await TransportManager().run_stdio(server, options)

        server.run.assert_awaited_once_with(streams[0], streams[1], options)


class TestRunStreamableHttp:
    @pytest.mark.asyncio
    async def test_mounts_mcp_and_stops_with_uvicorn(self) -> None:
        app = create_app()
        server = MagicMock(spec=["run"])
        server.run = AsyncMock()
        streams = (MagicMock(), MagicMock())

        transport = MagicMock()
        connect_cm = MagicMock()
        connect_cm.__aenter__ = AsyncMock(return_value=streams)
        connect_cm.__aexit__ = AsyncMock(return_value=False)
        transport.connect.return_value = connect_cm

        with patch("zuglang_tools.server.transport.StreamableHTTPServerTransport", return_value=transport), patch(
            "zuglang_tools.server.transport.uvicorn"
        ) as mock_uvicorn:
            mock_uvicorn.Server.return_value.serve = AsyncMock()
            await TransportManager(port=9002).run_streamable_http(server, MagicMock(), app)

        assert any(getattr(route, "path", None) == MCP_PATH for route in app.router.routes)
        mock_uvicorn.Server.return_value.serve.assert_awaited_once()
