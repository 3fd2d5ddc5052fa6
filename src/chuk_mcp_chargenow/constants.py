"""
Constants for chuk-mcp-chargenow server.

All magic strings, API metadata, and configuration values live here.
"""


class ServerConfig:
    NAME = "chuk-mcp-chargenow"
    VERSION = "0.1.0"
    DESCRIPTION = "EV charge point availability MCP Server via ChargeNow and geocode.maps.co"


class GeocodeConfig:
    BASE_URL = "https://geocode.maps.co"


class ChargeNowConfig:
    API_URL = "https://chargenow.com/api/map/v1/de/query"
    USER_AGENT = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/18.1 Safari/605.1.15"
    )
    ACCEPT = "application/json, text/plain, */*"
    CONTENT_TYPE = "application/json"
    ROUTING_HEADER = "rest-api-path"
    SEARCH_PRECISION = 7
    LANGUAGE = "en"
    FALLBACK_LANGUAGE = "de"
    REVERSE_GEOCODE_CONCURRENCY = 8


class RestApiPath:
    """Values of the routing header that select a ChargeNow query."""

    CLUSTERS = "clusters"
    CHARGE_POINTS = "charge-points"
    POOLS = "pools"


class EnvVar:
    MCP_STDIO = "MCP_STDIO"
    GEOCODE_API_KEY = "GEOCODE_API_KEY"
    GEOCODE_BASE_URL = "GEOCODE_BASE_URL"
    CHARGENOW_API_URL = "CHARGENOW_API_URL"


# Search box half-size in degrees around the geocoded address.
LAT_OFFSET = 0.005
LON_OFFSET = 0.005

EARTH_RADIUS_KM = 6371.0

DEFAULT_LOCATION_NAME = "Charging Station"

# Tool lists
CHARGEPOINT_TOOLS = ["find_available_chargepoints"]
ALL_TOOLS = CHARGEPOINT_TOOLS


class ErrorMessages:
    MISSING_API_KEY = "Geocode API key is missing in server configuration."
    MISSING_API_KEY_ENV = "Environment variable {} is not set"
    NO_COORDINATES = "Could not find coordinates for address: {}"
    EMPTY_ADDRESS = "Address cannot be empty"
    API_ERROR = "{} API error (HTTP {}): {}"
    NETWORK_ERROR = "Network error contacting {}: {}"
    INVALID_JSON = "Invalid JSON from {}: {}"
    UNEXPECTED_SHAPE = "Unexpected response shape from {}: expected {}"


class SuccessMessages:
    NO_POOLS = "No charge pools found near {} ({}, {})"
    NO_CHARGE_POINT_IDS = "Found charge pools, but no specific charge point IDs near {}"
    NO_STATUSES = "No charge point statuses found near {}."
    REPORT_HEADER = "Charging Stations near {}:"
