"""MCP tool modules for chuk-mcp-chargenow."""
