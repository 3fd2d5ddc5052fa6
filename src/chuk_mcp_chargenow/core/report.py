"""
Report building: join pools, details, and statuses into a text summary.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ..constants import DEFAULT_LOCATION_NAME, SuccessMessages
from ..models.chargenow import ChargePointStatus, ChargePool, OperationalState, PoolDetail
from .geo import Coordinate, haversine_km


@dataclass
class ReportGroup:
    """A pool with its details, matching statuses, and distance from the search point."""

    pool: ChargePool
    detail: PoolDetail | None
    statuses: list[ChargePointStatus]
    distance_km: float


def count_states(statuses: Iterable[ChargePointStatus]) -> Counter:
    """Count statuses per OperationalState."""
    return Counter(status.state for status in statuses)


def build_groups(
    statuses: list[ChargePointStatus],
    pools: list[ChargePool],
    pool_details: list[PoolDetail],
    search_coord: Coordinate,
) -> list[ReportGroup]:
    """Group statuses by pool, dropping pools without statuses, nearest first."""
    details_by_id = {detail.dcs_pool_id: detail for detail in pool_details}
    groups = []
    for pool in pools:
        distance = haversine_km(
            search_coord.latitude, search_coord.longitude, pool.latitude, pool.longitude
        )
        cp_ids = set(pool.charge_point_ids)
        pool_statuses = [s for s in statuses if s.charge_point_id in cp_ids]
        if pool_statuses:
            groups.append(
                ReportGroup(
                    pool=pool,
                    detail=details_by_id.get(pool.id),
                    statuses=pool_statuses,
                    distance_km=distance,
                )
            )
    groups.sort(key=lambda g: g.distance_km)
    return groups


def location_name(detail: PoolDetail | None) -> str:
    if detail and detail.locations and detail.locations[0].names:
        name = detail.locations[0].names[0].name
        if name:
            return name
    return DEFAULT_LOCATION_NAME


def connector_summary(detail: PoolDetail) -> list[str]:
    """Distinct ``plugType (powerLevelkW)`` labels in first-seen order.

    Connectors without a plug type are left out; a missing power level drops
    the bracketed part.
    """
    labels: dict[str, None] = {}
    for connector in detail.connectors:
        if not connector.plug_type:
            continue
        if connector.power_level is None:
            labels[connector.plug_type] = None
        else:
            labels[f"{connector.plug_type} ({_format_number(connector.power_level)}kW)"] = None
    return list(labels)


def format_update_time(timestamp: str) -> str:
    """Render an ISO timestamp as local time of day; unparseable input is returned as-is."""
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return parsed.astimezone().strftime("%H:%M:%S")


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_group(group: ReportGroup) -> list[str]:
    detail = group.detail
    lines = ["", f"📍 {location_name(detail)} ({group.distance_km:.2f} km)"]

    if detail is not None:
        if detail.locations:
            loc = detail.locations[0]
            lines.append(f"   Address: {loc.street}, {loc.zip_code} {loc.city}")
        if detail.operator_name:
            lines.append(f"   Operator: {detail.operator_name}")
        if detail.payment_methods:
            lines.append(f"   Payment: {', '.join(detail.payment_methods)}")
        if detail.open_24h is not None:
            lines.append(f"   Hours: {'24/7' if detail.open_24h else 'Limited hours'}")
        connectors = connector_summary(detail)
        if connectors:
            lines.append(f"   Connectors: {', '.join(connectors)}")

    counts = count_states(group.statuses)
    lines.append("   Status:")
    lines.append(f"   • {counts[OperationalState.AVAILABLE]} available points")
    if counts[OperationalState.CHARGING] > 0:
        lines.append(f"   • {counts[OperationalState.CHARGING]} points in use")
    if counts[OperationalState.OFFLINE] > 0:
        lines.append(f"   • {counts[OperationalState.OFFLINE]} points offline")

    latest = group.statuses[0].timestamp
    if latest:
        lines.append(f"   Last updated: {format_update_time(latest)}")
    return lines


def format_report(
    statuses: list[ChargePointStatus],
    pools: list[ChargePool],
    pool_details: list[PoolDetail],
    search_coord: Coordinate,
    address: str,
) -> str:
    """Render the charge point report for an address.

    Summary counts cover every status passed in; the detailed section lists
    only pools that have at least one matching status, nearest first.

    Args:
        statuses: Live statuses for all charge points searched
        pools: Pools found around the search point
        pool_details: Static pool metadata, matched by pool id
        search_coord: Geocoded search point
        address: Address label shown in the report

    Returns:
        Multi-line report text
    """
    if not pools or not statuses:
        return SuccessMessages.NO_STATUSES.format(address)

    groups = build_groups(statuses, pools, pool_details, search_coord)
    totals = count_states(statuses)

    lines = [SuccessMessages.REPORT_HEADER.format(address), "", "Summary:"]
    lines.append(f"• {totals[OperationalState.AVAILABLE]} charge points AVAILABLE")
    lines.append(f"• {totals[OperationalState.CHARGING]} charge points in use (CHARGING)")
    if totals[OperationalState.OFFLINE] > 0:
        lines.append(f"• {totals[OperationalState.OFFLINE]} charge points OFFLINE")
    lines.append("")
    lines.append("Detailed Locations:")

    for group in groups:
        lines.extend(_format_group(group))

    return "\n".join(lines).strip()
