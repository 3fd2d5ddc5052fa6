"""
Lightweight MCP tool runner for chuk-mcp-chargenow.

Runs tools directly without MCP transport — useful for testing and demos.
Requires GEOCODE_API_KEY in the environment.
"""

from __future__ import annotations

import asyncio
import sys
from typing import Any

from chuk_mcp_chargenow.config import Settings
from chuk_mcp_chargenow.core.finder import ChargePointFinder
from chuk_mcp_chargenow.tools.chargepoints import register_chargepoint_tools


class _MiniMCP:
    """Minimal MCP-like interface for capturing tool registrations."""

    def __init__(self):
        self._tools: dict[str, Any] = {}

    def tool(self):
        def decorator(fn):
            self._tools[fn.__name__] = fn
            return fn

        return decorator

    def get_tool(self, name: str):
        return self._tools[name]


class ToolRunner:
    """Run chargenow MCP tools directly without transport."""

    def __init__(self, settings: Settings):
        self._mcp = _MiniMCP()
        self.finder = ChargePointFinder(settings)
        register_chargepoint_tools(self._mcp, self.finder)

    @property
    def tool_names(self) -> list[str]:
        return list(self._mcp._tools.keys())

    async def run(self, tool_name: str, **kwargs) -> str:
        """Run a tool and return its text output."""
        fn = self._mcp.get_tool(tool_name)
        return await fn(**kwargs)

    async def close(self) -> None:
        await self.finder.close()


async def main():
    """Demo: look up charge points for an address from the command line."""
    address = " ".join(sys.argv[1:]) or "Bautzener Str Berlin"
    runner = ToolRunner(Settings.from_env())

    print(f"Available tools ({len(runner.tool_names)}): {runner.tool_names}\n")
    print("=" * 60)
    print(f"find_available_chargepoints — {address}")
    print("=" * 60)
    try:
        print(await runner.run("find_available_chargepoints", address=address))
    finally:
        await runner.close()


if __name__ == "__main__":
    asyncio.run(main())
