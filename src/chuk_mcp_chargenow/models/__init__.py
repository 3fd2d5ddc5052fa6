"""Response and upstream payload models for chuk-mcp-chargenow."""

from .chargenow import (
    ChargePointRef,
    ChargePointStatus,
    ChargePool,
    ChargingStation,
    Connector,
    OperationalState,
    PoolDetail,
    PoolLocation,
)
from .responses import ErrorResponse, ReportResponse

__all__ = [
    "ChargePointRef",
    "ChargePointStatus",
    "ChargePool",
    "ChargingStation",
    "Connector",
    "ErrorResponse",
    "OperationalState",
    "PoolDetail",
    "PoolLocation",
    "ReportResponse",
]
