"""Shared test fixtures for chuk-mcp-chargenow."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from chuk_mcp_chargenow.config import Settings
from chuk_mcp_chargenow.core.geo import Coordinate
from chuk_mcp_chargenow.models.chargenow import ChargePointStatus, ChargePool, PoolDetail

GEOCODE_URL = "https://geocode.maps.co"
CHARGENOW_URL = "https://chargenow.com/api/map/v1/de/query"

# Sample upstream API responses
SAMPLE_SEARCH_RESPONSE = [
    {
        "place_id": 123456,
        "lat": "52.4986",
        "lon": "13.3623",
        "display_name": "Bautzener Straße, Schöneberg, Berlin, 10829, Germany",
    }
]

SAMPLE_REVERSE_RESPONSE = {
    "place_id": 654321,
    "lat": "52.4987",
    "lon": "13.3624",
    "display_name": "10, Bautzener Straße, Schöneberg, Berlin, 10829, Germany",
    "address": {"road": "Bautzener Straße", "city": "Berlin", "postcode": "10829"},
    "boundingbox": ["52.49", "52.50", "13.36", "13.37"],
}

SAMPLE_CLUSTER_RESPONSE = {
    "poolClusters": [],
    "pools": [
        {
            "id": "pool-far",
            "latitude": 52.5010,
            "longitude": 13.3650,
            "chargePointCount": 2,
            "chargePoints": [{"id": "cp-1"}, {"id": "cp-2"}],
        },
        {
            "id": "pool-near",
            "latitude": 52.4987,
            "longitude": 13.3624,
            "chargePointCount": 2,
            "chargePoints": [{"id": "cp-3"}, {"id": "cp-4"}],
        },
    ],
}

SAMPLE_POOL_DETAILS_RESPONSE = [
    {
        "dcsPoolId": "pool-near",
        "incomingPoolId": "DE*ALG*P1",
        "poolPaymentMethods": ["APP", "RFID"],
        "poolLocations": [
            {
                "type": "ON_STREET",
                "coordinates": {"latitude": 52.4987, "longitude": 13.3624},
                "street": "Bautzener Str. 10",
                "zipCode": "10829",
                "city": "Berlin",
                "countryCode": "DE",
                "poolLocationDescriptions": [],
                "poolLocationNames": [{"language": "en", "name": "Bautzener Strasse"}],
            }
        ],
        "poolContacts": [{"name": "Allego", "phone": "+49 30 0000"}],
        "chargingStations": [
            {
                "dcsCsId": "cs-1",
                "incomingCsId": "in-cs-1",
                "chargePoints": [
                    {
                        "dcsCpId": "cp-3",
                        "incomingCpId": "in-cp-3",
                        "connectors": [
                            {
                                "plugType": "Type2",
                                "cableAttached": "false",
                                "phaseType": "AC_3_PHASE",
                                "ampere": 32,
                                "powerLevel": 22,
                                "voltage": 400,
                            }
                        ],
                        "dynamicInfoAvailable": True,
                        "isoNormedId": True,
                    }
                ],
                "chargingStationAuthMethods": ["RFID"],
            },
            {
                "dcsCsId": "cs-2",
                "incomingCsId": "in-cs-2",
                "chargePoints": [
                    {
                        "dcsCpId": "cp-4",
                        "incomingCpId": "in-cp-4",
                        "connectors": [
                            {
                                "plugType": "Type2",
                                "cableAttached": "false",
                                "phaseType": "AC_3_PHASE",
                                "ampere": 32,
                                "powerLevel": 22,
                                "voltage": 400,
                            }
                        ],
                        "dynamicInfoAvailable": True,
                        "isoNormedId": True,
                    }
                ],
                "chargingStationAuthMethods": ["RFID"],
            },
        ],
        "technicalChargePointOperatorName": "Allego",
        "poolLocationType": "ON_STREET",
        "access": "PUBLIC",
        "open24h": True,
    }
]

SAMPLE_STATUS_RESPONSE = {
    "DCSChargePointDynStatusResponse": [
        {"dcsChargePointId": "cp-1", "OperationalStateCP": "AVAILABLE", "Timestamp": "2024-05-01T12:00:00Z"},
        {"dcsChargePointId": "cp-2", "OperationalStateCP": "OFFLINE", "Timestamp": "2024-05-01T12:00:00Z"},
        {"dcsChargePointId": "cp-3", "OperationalStateCP": "AVAILABLE", "Timestamp": "2024-05-01T12:34:56Z"},
        {"dcsChargePointId": "cp-4", "OperationalStateCP": "CHARGING", "Timestamp": "2024-05-01T12:30:00Z"},
    ],
    "ResponseStatus": {"code": 0, "description": "OK", "invalidDCSChargePointIdList": None},
}

SEARCH_COORD = Coordinate(latitude=52.4986, longitude=13.3623)


@pytest.fixture
def settings():
    return Settings(geocode_api_key="test-key")


@pytest.fixture
def sample_pools():
    return [ChargePool.model_validate(p) for p in SAMPLE_CLUSTER_RESPONSE["pools"]]


@pytest.fixture
def sample_details():
    return [PoolDetail.model_validate(d) for d in SAMPLE_POOL_DETAILS_RESPONSE]


@pytest.fixture
def sample_statuses():
    return [
        ChargePointStatus.model_validate(s)
        for s in SAMPLE_STATUS_RESPONSE["DCSChargePointDynStatusResponse"]
    ]


@pytest.fixture
def mock_geocode_client():
    """Mock GeocodeClient with canned results."""
    client = AsyncMock()
    client.forward = AsyncMock(return_value=SEARCH_COORD)
    client.reverse = AsyncMock(return_value=SAMPLE_REVERSE_RESPONSE["display_name"])
    return client


@pytest.fixture
def mock_chargenow_client(sample_pools, sample_details, sample_statuses):
    """Mock ChargeNowClient with canned results."""
    client = AsyncMock()
    client.search_pools = AsyncMock(return_value=sample_pools)
    client.pool_details = AsyncMock(return_value=sample_details)
    client.charge_point_statuses = AsyncMock(return_value=sample_statuses)
    return client


@pytest.fixture
def mock_finder(settings, mock_geocode_client, mock_chargenow_client):
    """ChargePointFinder with mocked clients."""
    from chuk_mcp_chargenow.core.finder import ChargePointFinder

    return ChargePointFinder(
        settings, geocoder=mock_geocode_client, chargenow=mock_chargenow_client
    )


@pytest.fixture
def mock_mcp():
    """Mock ChukMCPServer."""
    mcp = MagicMock()
    mcp.tool = MagicMock(return_value=lambda fn: fn)
    return mcp
