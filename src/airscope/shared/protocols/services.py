"""Service protocols for dependency inversion.

The gateway and cache depend on these interfaces rather than on concrete
HTTP or storage classes, so tests can substitute in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """String-keyed storage of serialized cache entries.

    Example:
        >>> from airscope.services.cache_store import InMemoryKeyValueStore
        >>> store: KeyValueStore = InMemoryKeyValueStore()
        >>> store.set_item("aqi_cache_delhi", '{"data": {}, "timestamp": 0}')
    """

    def get_item(self, key: str) -> str | None:
        """Return the stored text for key, or None."""

    def set_item(self, key: str, value: str) -> None:
        """Store text under key, replacing any previous value."""

    def remove_item(self, key: str) -> None:
        """Delete key if present."""

    def keys(self) -> Iterable[str]:
        """Iterate over all stored keys."""


class AirQualityUpstream(Protocol):
    """Transport to the primary reading and search provider.

    Implementations return the decoded JSON body and raise
    ``RequestTimeoutError`` / ``TransportError`` for failed requests and
    ``ConfigError`` when no usable credential is configured.
    """

    @property
    def is_configured(self) -> bool:
        """True when a structurally valid credential is available."""

    async def fetch_feed(self, term: str) -> Any:
        """GET the feed for a place name."""

    async def fetch_geo_feed(self, lat: float, lng: float) -> Any:
        """GET the feed for a coordinate pair."""

    async def search(self, keyword: str) -> Any:
        """GET station search results for a keyword."""
