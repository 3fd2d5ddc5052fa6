#!/usr/bin/env python3
"""
ChargeNow MCP Server - Entry Point

Finds EV charge points near an address and reports their live availability.
Supports both stdio (for Claude Desktop) and HTTP (for API access) transports.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .constants import EnvVar

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)

from .async_server import create_server  # noqa: E402
from .config import ConfigurationError, Settings  # noqa: E402


def main() -> None:
    """Main entry point for the MCP server."""
    import argparse

    parser = argparse.ArgumentParser(description="ChargeNow MCP Server")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["stdio", "http"],
        default=None,
        help="Transport mode (stdio for Claude Desktop, http for API)",
    )
    parser.add_argument(
        "--host", default="localhost", help="Host for HTTP mode (default: localhost)"
    )
    parser.add_argument("--port", type=int, default=8011, help="Port for HTTP mode (default: 8011)")

    args = parser.parse_args()

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    mcp = create_server(settings)

    if args.mode is None:
        stdio = bool(os.environ.get(EnvVar.MCP_STDIO)) or not sys.stdin.isatty()
        suffix = " (auto-detected)" if stdio else ""
    else:
        stdio = args.mode == "stdio"
        suffix = ""

    try:
        if stdio:
            print(f"ChargeNow MCP Server starting in STDIO mode{suffix}", file=sys.stderr)
            mcp.run(stdio=True)
        else:
            print(
                f"ChargeNow MCP Server starting in HTTP mode on {args.host}:{args.port}",
                file=sys.stderr,
            )
            mcp.run(host=args.host, port=args.port, stdio=False)
    except Exception as e:
        logger.error("Failed to start transport: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
