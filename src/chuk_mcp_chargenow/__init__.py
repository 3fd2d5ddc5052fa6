"""chuk-mcp-chargenow: EV charge point availability MCP server."""

from .constants import ServerConfig

__version__ = ServerConfig.VERSION
