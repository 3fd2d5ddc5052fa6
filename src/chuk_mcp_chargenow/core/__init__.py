"""Core clients and pipeline for chuk-mcp-chargenow."""
