"""
Upstream ChargeNow payload models.

These mirror the JSON shapes returned by the ChargeNow map API. Field names
are snake_case with the upstream camelCase keys as aliases; unknown keys are
ignored and numeric ids are coerced to strings.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OperationalState(str, Enum):
    """Live state of a single charge point."""

    AVAILABLE = "AVAILABLE"
    CHARGING = "CHARGING"
    OFFLINE = "OFFLINE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


# --- Cluster search ---


class ChargePointRef(_UpstreamModel):
    """Charge point id as listed inside a pool search result."""

    id: str


class ChargePool(_UpstreamModel):
    """A charge pool found by the bounding-box search."""

    id: str
    longitude: float
    latitude: float
    charge_point_count: int = Field(0, alias="chargePointCount")
    charge_points: list[ChargePointRef] = Field(default_factory=list, alias="chargePoints")
    address: str | None = None
    name: str | None = None
    operator: str | None = None

    @property
    def charge_point_ids(self) -> list[str]:
        return [cp.id for cp in self.charge_points]


class ClusterResponse(_UpstreamModel):
    """Cluster search envelope. Pools stay raw so each one is validated on its own."""

    pool_clusters: list[dict] = Field(default_factory=list, alias="poolClusters")
    pools: list[Any] = Field(default_factory=list)


# --- Pool details ---


class LocalizedName(_UpstreamModel):
    language: str | None = None
    name: str | None = None


class LocalizedText(_UpstreamModel):
    language: str | None = None
    text: str | None = None


class GeoPoint(_UpstreamModel):
    latitude: float | None = None
    longitude: float | None = None


class PoolLocation(_UpstreamModel):
    type: str | None = None
    coordinates: GeoPoint | None = None
    street: str = ""
    zip_code: str = Field("", alias="zipCode")
    city: str = ""
    country_code: str | None = Field(None, alias="countryCode")
    descriptions: list[LocalizedText] = Field(
        default_factory=list, alias="poolLocationDescriptions"
    )
    names: list[LocalizedName] = Field(default_factory=list, alias="poolLocationNames")


class Connector(_UpstreamModel):
    plug_type: str | None = Field(None, alias="plugType")
    cable_attached: str | None = Field(None, alias="cableAttached")
    phase_type: str | None = Field(None, alias="phaseType")
    ampere: float | None = None
    power_level: float | None = Field(None, alias="powerLevel")
    voltage: float | None = None


class StationChargePoint(_UpstreamModel):
    dcs_cp_id: str | None = Field(None, alias="dcsCpId")
    incoming_cp_id: str | None = Field(None, alias="incomingCpId")
    connectors: list[Connector] = Field(default_factory=list)
    dynamic_info_available: bool | None = Field(None, alias="dynamicInfoAvailable")
    iso_normed_id: bool | None = Field(None, alias="isoNormedId")


class ChargingStation(_UpstreamModel):
    dcs_cs_id: str | None = Field(None, alias="dcsCsId")
    incoming_cs_id: str | None = Field(None, alias="incomingCsId")
    charge_points: list[StationChargePoint] = Field(default_factory=list, alias="chargePoints")
    location: PoolLocation | None = Field(None, alias="chargingStationLocation")
    auth_methods: list[str] = Field(default_factory=list, alias="chargingStationAuthMethods")


class PoolContact(_UpstreamModel):
    name: str | None = None
    phone: str | None = None


class PoolDetail(_UpstreamModel):
    """Static metadata for a pool, keyed by ``dcs_pool_id`` (== ``ChargePool.id``)."""

    dcs_pool_id: str = Field(..., alias="dcsPoolId")
    incoming_pool_id: str | None = Field(None, alias="incomingPoolId")
    payment_methods: list[str] = Field(default_factory=list, alias="poolPaymentMethods")
    locations: list[PoolLocation] = Field(default_factory=list, alias="poolLocations")
    contacts: list[PoolContact] = Field(default_factory=list, alias="poolContacts")
    charging_stations: list[ChargingStation] = Field(
        default_factory=list, alias="chargingStations"
    )
    operator_name: str | None = Field(None, alias="technicalChargePointOperatorName")
    location_type: str | None = Field(None, alias="poolLocationType")
    access: str | None = None
    open_24h: bool | None = Field(None, alias="open24h")

    @property
    def connectors(self) -> list[Connector]:
        return [
            connector
            for station in self.charging_stations
            for cp in station.charge_points
            for connector in cp.connectors
        ]


# --- Dynamic status ---


class ChargePointStatus(_UpstreamModel):
    """Live status of one charge point."""

    charge_point_id: str = Field(..., alias="dcsChargePointId")
    state: OperationalState = Field(OperationalState.UNKNOWN, alias="OperationalStateCP")
    timestamp: str | None = Field(None, alias="Timestamp")

    @field_validator("state", mode="before")
    @classmethod
    def _coerce_state(cls, value):
        return OperationalState(value)


class ResponseStatus(_UpstreamModel):
    code: int | None = None
    description: str | None = None
    invalid_ids: list[str] | None = Field(None, alias="invalidDCSChargePointIdList")


class StatusResponse(_UpstreamModel):
    """Status envelope. Entries stay raw so each one is validated on its own."""

    statuses: list[Any] = Field(
        default_factory=list, alias="DCSChargePointDynStatusResponse"
    )
    response_status: ResponseStatus | None = Field(None, alias="ResponseStatus")
