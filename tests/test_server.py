"""Tests for server entry point and async server."""

import pytest
from unittest.mock import MagicMock, patch

from chuk_mcp_chargenow.config import Settings

ENV = {"GEOCODE_API_KEY": "test-key"}


class TestAsyncServer:
    def test_create_server(self):
        from chuk_mcp_chargenow.async_server import create_server

        mcp = create_server(Settings(geocode_api_key="k"))
        assert mcp is not None

    def test_server_has_tool(self):
        from chuk_mcp_chargenow.async_server import create_server

        mcp = create_server(Settings(geocode_api_key="k"))
        tools = mcp.get_tools()
        assert len(tools) > 0


class TestServerModule:
    def test_main_exists(self):
        from chuk_mcp_chargenow.server import main

        assert callable(main)

    @patch("chuk_mcp_chargenow.server.create_server")
    def test_main_stdio_mode(self, mock_create):
        from chuk_mcp_chargenow.server import main

        with (
            patch("sys.argv", ["chuk-mcp-chargenow", "stdio"]),
            patch.dict("os.environ", ENV, clear=True),
        ):
            main()
        mock_create.return_value.run.assert_called_once_with(stdio=True)

    @patch("chuk_mcp_chargenow.server.create_server")
    def test_main_passes_settings(self, mock_create):
        from chuk_mcp_chargenow.server import main

        with (
            patch("sys.argv", ["chuk-mcp-chargenow", "stdio"]),
            patch.dict("os.environ", ENV, clear=True),
        ):
            main()
        settings = mock_create.call_args.args[0]
        assert settings.geocode_api_key == "test-key"

    @patch("chuk_mcp_chargenow.server.create_server")
    def test_main_http_mode(self, mock_create):
        from chuk_mcp_chargenow.server import main

        with (
            patch("sys.argv", ["chuk-mcp-chargenow", "http", "--port", "9999"]),
            patch.dict("os.environ", ENV, clear=True),
        ):
            main()
        mock_create.return_value.run.assert_called_once_with(
            host="localhost", port=9999, stdio=False
        )

    @patch("chuk_mcp_chargenow.server.create_server")
    def test_main_auto_detect_stdio_env(self, mock_create):
        from chuk_mcp_chargenow.server import main

        with (
            patch("sys.argv", ["chuk-mcp-chargenow"]),
            patch.dict("os.environ", {**ENV, "MCP_STDIO": "1"}, clear=True),
        ):
            main()
        mock_create.return_value.run.assert_called_once_with(stdio=True)

    @patch("chuk_mcp_chargenow.server.create_server")
    def test_main_auto_detect_not_tty(self, mock_create):
        from chuk_mcp_chargenow.server import main

        with (
            patch("sys.argv", ["chuk-mcp-chargenow"]),
            patch("sys.stdin") as mock_stdin,
            patch.dict("os.environ", ENV, clear=True),
        ):
            mock_stdin.isatty.return_value = False
            main()
        mock_create.return_value.run.assert_called_once_with(stdio=True)

    @patch("chuk_mcp_chargenow.server.create_server")
    def test_main_default_http(self, mock_create):
        from chuk_mcp_chargenow.server import main

        with (
            patch("sys.argv", ["chuk-mcp-chargenow"]),
            patch("sys.stdin") as mock_stdin,
            patch.dict("os.environ", ENV, clear=True),
        ):
            mock_stdin.isatty.return_value = True
            main()
        mock_create.return_value.run.assert_called_once_with(
            host="localhost", port=8011, stdio=False
        )

    @patch("chuk_mcp_chargenow.server.create_server")
    def test_main_missing_api_key_exits(self, mock_create):
        from chuk_mcp_chargenow.server import main

        with (
            patch("sys.argv", ["chuk-mcp-chargenow", "stdio"]),
            patch.dict("os.environ", {}, clear=True),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()
        assert exc_info.value.code == 1
        mock_create.assert_not_called()

    @patch("chuk_mcp_chargenow.server.create_server")
    def test_main_transport_failure_exits(self, mock_create):
        from chuk_mcp_chargenow.server import main

        mock_create.return_value = MagicMock()
        mock_create.return_value.run.side_effect = OSError("stdin closed")
        with (
            patch("sys.argv", ["chuk-mcp-chargenow", "stdio"]),
            patch.dict("os.environ", ENV, clear=True),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()
        assert exc_info.value.code == 1
