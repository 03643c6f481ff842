"""
Upstream API Constants

Endpoints, timeouts and payload field names for the air-quality
providers.
"""

from .system import BASE_SECOND


class WAQIConfig:
    """World Air Quality Index project API."""

    BASE_URL = "https://api.waqi.info"
    FEED_PATH = "/feed/{term}/"
    GEO_FEED_PATH = "/feed/geo:{lat};{lng}/"
    SEARCH_PATH = "/search/"

    READING_TIMEOUT = 8 * BASE_SECOND
    SEARCH_TIMEOUT = 3 * BASE_SECOND

    # Tokens shorter than this are treated as malformed
    MIN_TOKEN_LENGTH = 10
    TOKEN_ENV_VAR = "WAQI_API_TOKEN"  # noqa: S105  # nosec B105 - env var name

    STATUS_OK = "ok"
    MAX_SEARCH_RESULTS = 5
    STATION_URL_TEMPLATE = "https://aqicn.org/city/{slug}/"


class DataGovConfig:
    """data.gov.in real-time AQI resource."""

    RESOURCE_URL = (
        "https://api.data.gov.in/resource/7c3c0e24-d74a-4ee8-922e-43509f20c1cf"
    )
    TIMEOUT = 10 * BASE_SECOND
    HEALTH_TIMEOUT = 5 * BASE_SECOND
    DEFAULT_LIMIT = 100
    CITIES_LIMIT = 1000
    SEARCH_LIMIT = 500
    KEY_ENV_VAR = "DATAGOV_API_KEY"
    FORMAT = "json"

    FALLBACK_CITIES = (
        "Delhi",
        "Mumbai",
        "Bangalore",
        "Chennai",
        "Kolkata",
        "Hyderabad",
        "Pune",
        "Ahmedabad",
        "Jaipur",
        "Lucknow",
        "Kanpur",
        "Nagpur",
        "Indore",
        "Thane",
        "Bhopal",
        "Visakhapatnam",
        "Pimpri-Chinchwad",
        "Patna",
        "Vadodara",
        "Ghaziabad",
        "Ludhiana",
        "Agra",
        "Nashik",
    )


class LocationDefaults:
    """Fallback location used when nothing better is known."""

    DEFAULT_COORDINATES = (28.6139, 77.2090)  # Delhi
    UNKNOWN_NAME = "Unknown Location"
    CURRENT_LOCATION_NAME = "Current Location"
    DEFAULT_TIMEZONE = "+05:30"

    GEOLOCATION_TIMEOUT = 10 * BASE_SECOND
    GEOLOCATION_MAX_AGE = 300 * BASE_SECOND


class SearchLimits:
    """Result limits for the local search tiers."""

    MIN_QUERY_LENGTH = 2
    DEFAULT_LIMIT = 6
    GATEWAY_LOCAL_LIMIT = 8
    INSTANT_POPULAR_LIMIT = 5
    INSTANT_LIMIT = 6
