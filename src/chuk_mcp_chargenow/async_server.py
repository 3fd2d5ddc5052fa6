#!/usr/bin/env python3
"""
Async ChargeNow MCP Server using chuk-mcp-server

Finds EV charge points near an address and reports their live availability
via geocode.maps.co and the ChargeNow map API.
"""

import logging

from chuk_mcp_server import ChukMCPServer

from .config import Settings
from .constants import ServerConfig
from .core.finder import ChargePointFinder
from .tools.chargepoints import register_chargepoint_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_server(settings: Settings) -> ChukMCPServer:
    """Create the MCP server and register all tool modules."""
    mcp = ChukMCPServer(ServerConfig.NAME)
    finder = ChargePointFinder(settings)
    register_chargepoint_tools(mcp, finder)
    logger.info("Registered tools with %r", settings)
    return mcp


# Run the server
if __name__ == "__main__":
    logger.info("Starting ChargeNow MCP Server...")
    create_server(Settings.from_env()).run(stdio=True)
