"""
Low-level async HTTP client for the geocode.maps.co API.

Forward and reverse lookups never raise: any failure is logged and
reported as ``None``.
"""

import logging
import math

import httpx

from ..config import Settings
from ..constants import ErrorMessages
from .fetch import best_effort
from .geo import Coordinate

logger = logging.getLogger(__name__)

_SERVICE = "Geocode"


class GeocodeClient:
    """Async client for forward and reverse geocoding.

    Features:
    - API key appended to every request
    - Soft failure: errors are logged and mapped to ``None``
    """

    def __init__(self, settings: Settings):
        self._base_url = settings.geocode_base_url.rstrip("/")
        self._api_key = settings.geocode_api_key
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazily create httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def _request(self, endpoint: str, params: dict) -> dict | list:
        """GET ``{base}/{endpoint}`` and decode the JSON body."""
        params["api_key"] = self._api_key
        client = await self._get_client()
        url = f"{self._base_url}/{endpoint}"

        try:
            response = await client.get(url, params=params)
        except httpx.TransportError as e:
            raise ConnectionError(ErrorMessages.NETWORK_ERROR.format(_SERVICE, e)) from e

        if not response.is_success:
            raise RuntimeError(
                ErrorMessages.API_ERROR.format(
                    _SERVICE, response.status_code, response.reason_phrase
                )
            )
        try:
            return response.json()
        except ValueError as e:
            raise ValueError(ErrorMessages.INVALID_JSON.format(_SERVICE, e)) from e

    async def _search(self, address: str) -> Coordinate | None:
        data = await self._request("search", {"q": address})
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            return None
        try:
            lat = float(data[0].get("lat"))
            lon = float(data[0].get("lon"))
        except (TypeError, ValueError):
            return None
        if not (math.isfinite(lat) and math.isfinite(lon)):
            return None
        return Coordinate(latitude=lat, longitude=lon)

    async def _reverse(self, lat: float, lon: float) -> str | None:
        data = await self._request("reverse", {"lat": lat, "lon": lon})
        if isinstance(data, dict) and data.get("display_name"):
            return str(data["display_name"])
        logger.warning("No display_name in reverse geocode response for %s, %s", lat, lon)
        return None

    async def forward(self, address: str) -> Coordinate | None:
        """Resolve a free-text address to its first matching coordinate.

        Args:
            address: Street address and city

        Returns:
            Coordinate of the first result, or None
        """
        outcome = await best_effort(
            f"forward geocode '{address}'", lambda: self._search(address), None
        )
        if outcome.value is None:
            logger.info("No valid coordinates found for address: %s", address)
        else:
            logger.info(
                "Coordinates found for '%s': %s, %s",
                address,
                outcome.value.latitude,
                outcome.value.longitude,
            )
        return outcome.value

    async def reverse(self, lat: float, lon: float) -> str | None:
        """Resolve a coordinate to a display address, or None."""
        logger.info("Reverse geocoding %s, %s", lat, lon)
        outcome = await best_effort(
            f"reverse geocode ({lat}, {lon})", lambda: self._reverse(lat, lon), None
        )
        return outcome.value

    async def close(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
