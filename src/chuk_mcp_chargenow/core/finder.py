"""
Charge point finder: async orchestrator for one tool invocation.

Sequences geocoding, pool search, detail and status lookups, and report
formatting, stopping early when a step yields nothing to continue with.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from ..config import Settings
from ..constants import ErrorMessages, SuccessMessages
from ..models.responses import ErrorResponse, ReportResponse
from .chargenow import ChargeNowClient
from .geo import BoundingBox
from .geocode import GeocodeClient
from .report import format_report

logger = logging.getLogger(__name__)


class ChargePointFinder:
    """Central manager for the charge point lookup pipeline.

    Wraps GeocodeClient and ChargeNowClient and turns their results into a
    single tool response. Clients passed in are shared and closed by
    ``close()``; otherwise each ``find()`` opens its own and closes them
    before returning.
    """

    def __init__(
        self,
        settings: Settings,
        geocoder: GeocodeClient | None = None,
        chargenow: ChargeNowClient | None = None,
    ):
        self._settings = settings
        self._geocoder = geocoder
        self._chargenow = chargenow

    @asynccontextmanager
    async def _clients(self) -> AsyncIterator[tuple[GeocodeClient, ChargeNowClient]]:
        geocoder = self._geocoder or GeocodeClient(self._settings)
        chargenow = self._chargenow or ChargeNowClient(self._settings, geocoder)
        try:
            yield geocoder, chargenow
        finally:
            if self._chargenow is None:
                await chargenow.close()
            if self._geocoder is None:
                await geocoder.close()

    async def find(self, address: str) -> ReportResponse | ErrorResponse:
        """Find charge points near an address and report their availability.

        Args:
            address: Street address and city (e.g. "Bautzener Str Berlin")

        Returns:
            ReportResponse with the report or an informational message, or
            ErrorResponse when configuration or geocoding fails
        """
        logger.info("Finding charge points near: %s", address)

        if not self._settings.has_api_key:
            logger.error("Missing geocode API key in settings")
            return ErrorResponse(error=ErrorMessages.MISSING_API_KEY)

        if not address or not address.strip():
            return ErrorResponse(error=ErrorMessages.EMPTY_ADDRESS)

        async with self._clients() as (geocoder, chargenow):
            return await self._lookup(address, geocoder, chargenow)

    async def _lookup(
        self, address: str, geocoder: GeocodeClient, chargenow: ChargeNowClient
    ) -> ReportResponse | ErrorResponse:
        coord = await geocoder.forward(address)
        if coord is None:
            return ErrorResponse(error=ErrorMessages.NO_COORDINATES.format(address))

        pools = await chargenow.search_pools(BoundingBox.around(coord))
        if not pools:
            return ReportResponse(
                address=address,
                report=SuccessMessages.NO_POOLS.format(address, coord.latitude, coord.longitude),
            )

        pool_details = await chargenow.pool_details([pool.id for pool in pools])

        charge_point_ids = [cp_id for pool in pools for cp_id in pool.charge_point_ids]
        if not charge_point_ids:
            return ReportResponse(
                address=address,
                report=SuccessMessages.NO_CHARGE_POINT_IDS.format(address),
            )
        logger.info("Found %d charge point IDs.", len(charge_point_ids))

        statuses = await chargenow.charge_point_statuses(charge_point_ids)

        report = format_report(statuses, pools, pool_details, coord, address)
        return ReportResponse(address=address, report=report)

    async def close(self) -> None:
        """Close the HTTP clients passed in at construction."""
        if self._chargenow is not None:
            await self._chargenow.close()
        if self._geocoder is not None:
            await self._geocoder.close()
