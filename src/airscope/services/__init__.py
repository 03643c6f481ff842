"""Services module for AirScope.

Upstream clients, the cache, location resolution and the retrieval gateway.
"""

from .aqi_gateway import AQIGateway, RetrievalState, create_gateway
from .cache_store import CacheStore, InMemoryKeyValueStore, JSONFileKeyValueStore
from .datagov_client import DataGovClient
from .inflight import InFlightRegistry
from .location_resolver import LocationResolver, ScoredEntry
from .name_normalizer import NameNormalizer, normalize_location_name
from .synthetic import SyntheticReadingFactory
from .waqi_client import WAQIClient

__all__ = [
    "AQIGateway",
    "CacheStore",
    "DataGovClient",
    "InFlightRegistry",
    "InMemoryKeyValueStore",
    "JSONFileKeyValueStore",
    "LocationResolver",
    "NameNormalizer",
    "RetrievalState",
    "ScoredEntry",
    "SyntheticReadingFactory",
    "WAQIClient",
    "create_gateway",
    "normalize_location_name",
]
