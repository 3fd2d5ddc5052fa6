"""
Charge point tool registration for chuk-mcp-chargenow.

Registers the charge point availability lookup tool.
"""

import logging

from ...models.responses import ErrorResponse

logger = logging.getLogger(__name__)


def register_chargepoint_tools(mcp, finder):
    """Register charge point tools with the MCP server."""

    @mcp.tool()
    async def find_available_chargepoints(address: str) -> str:
        """Finds available electric vehicle charge points near a given address (street and city).

        Geocodes the address, searches the ChargeNow network for charge pools
        in a small box around it, and reports live availability per pool,
        nearest first, with operator, payment, opening hours and connector
        details where known.

        Args:
            address: The street address and city (e.g. "Bautzener Str Berlin")

        Returns:
            Human-readable availability report, or a message starting with
            "Error:" when the address cannot be resolved
        """
        try:
            response = await finder.find(address)
            return response.to_text()
        except Exception as e:
            logger.error("find_available_chargepoints failed: %s", e)
            return ErrorResponse(error=str(e)).to_text()
