"""Coordinates, search boxes, and great-circle distance."""

import math
from dataclasses import dataclass

from ..constants import EARTH_RADIUS_KM, LAT_OFFSET, LON_OFFSET


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class BoundingBox:
    """Search rectangle given by its north-west and south-east corners."""

    lat_nw: float
    lon_nw: float
    lat_se: float
    lon_se: float

    @classmethod
    def around(cls, center: Coordinate) -> "BoundingBox":
        """Box of fixed size centred on a coordinate."""
        return cls(
            lat_nw=center.latitude + LAT_OFFSET,
            lon_nw=center.longitude - LON_OFFSET,
            lat_se=center.latitude - LAT_OFFSET,
            lon_se=center.longitude + LON_OFFSET,
        )


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate distance between two points in kilometres using Haversine formula.

    Args:
        lat1, lon1: First point coordinates
        lat2, lon2: Second point coordinates

    Returns:
        Distance in kilometres
    """
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = (
        math.sin(d_phi / 2) * math.sin(d_phi / 2)
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lambda / 2)
        * math.sin(d_lambda / 2)
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
