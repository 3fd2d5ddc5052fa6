"""
Async HTTP client for the ChargeNow map API.

All queries are POSTed to a single endpoint and routed by the
``rest-api-path`` header. Each public operation soft-fails to an empty list.
"""

import asyncio
import logging

import httpx
from pydantic import BaseModel, ValidationError

from ..config import Settings
from ..constants import ChargeNowConfig, ErrorMessages, RestApiPath
from ..models.chargenow import (
    ChargePointStatus,
    ChargePool,
    ClusterResponse,
    PoolDetail,
    StatusResponse,
)
from .fetch import best_effort
from .geo import BoundingBox
from .geocode import GeocodeClient

logger = logging.getLogger(__name__)

_SERVICE = "ChargeNow"


def _validate_items(model: type[BaseModel], items: list, label: str) -> list:
    """Validate upstream entries one by one, skipping the ones that fail."""
    valid = []
    for index, item in enumerate(items):
        try:
            valid.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping malformed %s at index %d: %s", label, index, e)
    return valid


class ChargeNowClient:
    """Async client for pool search, pool details, and charge point status."""

    def __init__(self, settings: Settings, geocoder: GeocodeClient):
        self._url = settings.chargenow_api_url
        self._user_agent = settings.user_agent
        self._geocoder = geocoder
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazily create httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "Accept": ChargeNowConfig.ACCEPT,
                    "Content-Type": ChargeNowConfig.CONTENT_TYPE,
                    "User-Agent": self._user_agent,
                },
            )
        return self._client

    async def _request(self, path: str, body: dict) -> dict | list:
        """POST a query body with the given routing header value."""
        client = await self._get_client()
        try:
            response = await client.post(
                self._url,
                json=body,
                headers={ChargeNowConfig.ROUTING_HEADER: path},
            )
        except httpx.TransportError as e:
            raise ConnectionError(ErrorMessages.NETWORK_ERROR.format(_SERVICE, e)) from e

        if not response.is_success:
            raise RuntimeError(
                ErrorMessages.API_ERROR.format(
                    f"{_SERVICE} {path}", response.status_code, response.reason_phrase
                )
            )
        try:
            return response.json()
        except ValueError as e:
            raise ValueError(ErrorMessages.INVALID_JSON.format(_SERVICE, e)) from e

    # --- Pool search ---

    async def _fetch_pools(self, bbox: BoundingBox, precision: int) -> list[ChargePool]:
        body = {
            "searchCriteria": {
                "latitudeNW": bbox.lat_nw,
                "longitudeNW": bbox.lon_nw,
                "latitudeSE": bbox.lat_se,
                "longitudeSE": bbox.lon_se,
                "precision": precision,
                "unpackSolitudeCluster": False,
                "unpackClustersWithSinglePool": True,
            },
            "withChargePointIds": True,
            "filterCriteria": {},
        }
        data = await self._request(RestApiPath.CLUSTERS, body)
        if not isinstance(data, dict):
            raise ValueError(ErrorMessages.UNEXPECTED_SHAPE.format(_SERVICE, "object"))
        return _validate_items(ChargePool, ClusterResponse.model_validate(data).pools, "pool")

    async def _attach_addresses(self, pools: list[ChargePool]) -> list[ChargePool]:
        """Reverse geocode every pool concurrently, keeping the input order."""
        semaphore = asyncio.Semaphore(ChargeNowConfig.REVERSE_GEOCODE_CONCURRENCY)

        async def lookup(pool: ChargePool) -> str | None:
            async with semaphore:
                return await self._geocoder.reverse(pool.latitude, pool.longitude)

        addresses = await asyncio.gather(
            *(lookup(pool) for pool in pools), return_exceptions=True
        )
        enriched = []
        for pool, address in zip(pools, addresses):
            if isinstance(address, BaseException):
                logger.error("Reverse geocode for pool %s failed: %s", pool.id, address)
                address = None
            enriched.append(pool.model_copy(update={"address": address}))
        return enriched

    async def search_pools(
        self,
        bbox: BoundingBox,
        precision: int = ChargeNowConfig.SEARCH_PRECISION,
    ) -> list[ChargePool]:
        """Find charge pools inside a bounding box.

        Each pool found is reverse geocoded and its ``address`` set, or left
        as None when the lookup fails.

        Args:
            bbox: Search rectangle
            precision: Cluster precision sent to the API

        Returns:
            Pools in API response order, or an empty list on failure
        """
        outcome = await best_effort(
            "ChargeNow cluster search", lambda: self._fetch_pools(bbox, precision), []
        )
        pools = outcome.value
        logger.info("Found %d charge pools nearby.", len(pools))
        if not pools:
            return []
        return await self._attach_addresses(pools)

    # --- Pool details ---

    async def _fetch_pool_details(self, pool_ids: list[str]) -> list[PoolDetail]:
        body = {
            "dcsPoolIds": pool_ids,
            "filterCriteria": {
                "language": ChargeNowConfig.LANGUAGE,
                "fallbackLanguage": ChargeNowConfig.FALLBACK_LANGUAGE,
            },
        }
        data = await self._request(RestApiPath.POOLS, body)
        if not isinstance(data, list):
            raise ValueError(ErrorMessages.UNEXPECTED_SHAPE.format(_SERVICE, "array"))
        return _validate_items(PoolDetail, data, "pool detail")

    async def pool_details(self, pool_ids: list[str]) -> list[PoolDetail]:
        """Fetch static metadata for the given pools.

        Returns an empty list without a network call when ``pool_ids`` is empty.
        """
        if not pool_ids:
            return []
        outcome = await best_effort(
            "ChargeNow pool details", lambda: self._fetch_pool_details(pool_ids), []
        )
        logger.info("Retrieved details for %d pools", len(outcome.value))
        return outcome.value

    # --- Charge point status ---

    async def _fetch_statuses(self, charge_point_ids: list[str]) -> list[ChargePointStatus]:
        body = {
            "DCSChargePointDynStatusRequest": [
                {"dcsChargePointId": cp_id} for cp_id in charge_point_ids
            ]
        }
        data = await self._request(RestApiPath.CHARGE_POINTS, body)
        if not isinstance(data, dict):
            raise ValueError(ErrorMessages.UNEXPECTED_SHAPE.format(_SERVICE, "object"))
        parsed = StatusResponse.model_validate(data)
        if parsed.response_status and parsed.response_status.invalid_ids:
            logger.warning(
                "ChargeNow rejected %d charge point ids: %s",
                len(parsed.response_status.invalid_ids),
                ", ".join(parsed.response_status.invalid_ids),
            )
        return _validate_items(ChargePointStatus, parsed.statuses, "charge point status")

    async def charge_point_statuses(self, charge_point_ids: list[str]) -> list[ChargePointStatus]:
        """Fetch live status for the given charge points.

        Returns an empty list without a network call when ``charge_point_ids``
        is empty.
        """
        if not charge_point_ids:
            return []
        outcome = await best_effort(
            "ChargeNow status", lambda: self._fetch_statuses(charge_point_ids), []
        )
        logger.info("Retrieved status for %d charge points.", len(outcome.value))
        return outcome.value

    async def close(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
