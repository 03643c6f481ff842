"""
Cache Configuration Constants

Namespaces and TTLs for the reading, search and station caches.
"""

from .system import BASE_MINUTE


class CacheConfig:
    """Cache namespaces and lifetimes."""

    # Logical namespaces; stored keys are "<namespace>_<key>"
    NAMESPACE_READING = "aqi_cache"
    NAMESPACE_SEARCH = "search_cache"
    NAMESPACE_STATIONS = "datagov_aqi"

    NAMESPACES = (NAMESPACE_READING, NAMESPACE_SEARCH, NAMESPACE_STATIONS)
    KEY_SEPARATOR = "_"

    # TTL values (seconds)
    DEFAULT_TTL = 15 * BASE_MINUTE
    STATIONS_TTL = 5 * BASE_MINUTE

    # File backend
    FILE_SUFFIX = ".json"
    CORRUPTED_SUFFIX = ".corrupted"
