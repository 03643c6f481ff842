"""Air-quality retrieval gateway.

Every reading request walks the same state machine:

    CACHE_FRESH -> (UNCONFIGURED | NETWORK_ATTEMPT)
    NETWORK_ATTEMPT -> live reading | NETWORK_FAILURE
    NETWORK_FAILURE -> STALE_FALLBACK | SYNTHETIC_FALLBACK
    UNCONFIGURED -> SYNTHETIC_FALLBACK

Network-originating errors never escape the gateway; they are logged and
turned into fallback transitions. The ``source`` tag on the returned reading
tells the caller which path produced it.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from enum import Enum
from typing import Any

import aiohttp
from pydantic import ValidationError

from airscope.config.models import Settings
from airscope.core.gazetteer import GazetteerEntry
from airscope.services.cache_store import CacheStore, create_cache_store
from airscope.services.decoding import Err, decode_feed, decode_search
from airscope.services.inflight import InFlightRegistry
from airscope.services.location_resolver import LocationResolver
from airscope.services.name_normalizer import NameNormalizer
from airscope.services.synthetic import SyntheticReadingFactory
from airscope.services.waqi_client import WAQIClient
from airscope.shared.constants import CacheConfig, LocationDefaults, SearchLimits
from airscope.shared.errors import UPSTREAM_FAILURES, ConfigError
from airscope.shared.logging import log_operation_error, log_operation_success
from airscope.shared.models import AQIReading, LocationSuggestion, ReadingSource
from airscope.shared.protocols import AirQualityUpstream

logger = logging.getLogger(__name__)


class RetrievalState(Enum):
    """States of the reading retrieval machine."""

    CACHE_FRESH = "cache_fresh"
    UNCONFIGURED = "unconfigured"
    NETWORK_ATTEMPT = "network_attempt"
    NETWORK_FAILURE = "network_failure"
    STALE_FALLBACK = "stale_fallback"
    SYNTHETIC_FALLBACK = "synthetic_fallback"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AQIGateway:
    """Cache-first access to readings and location search.

    Args:
        upstream: Transport to the reading/search provider
        cache: Cache for readings and search results
        resolver: Local gazetteer search
        normalizer: Name normalizer and key builder
        synthetic: Factory for fallback readings
        inflight: Registry coalescing identical concurrent calls
        clock: Time source for readings without an observation time
    """

    def __init__(
        self,
        upstream: AirQualityUpstream,
        cache: CacheStore | None = None,
        resolver: LocationResolver | None = None,
        normalizer: NameNormalizer | None = None,
        synthetic: SyntheticReadingFactory | None = None,
        inflight: InFlightRegistry | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.upstream = upstream
        self.cache = cache or CacheStore()
        self.resolver = resolver or LocationResolver()
        self.normalizer = normalizer or NameNormalizer()
        self.synthetic = synthetic or SyntheticReadingFactory(clock=clock)
        self.inflight = inflight or InFlightRegistry()
        self._clock = clock

    def _enter(self, state: RetrievalState, key: str) -> None:
        logger.debug("Retrieval %s: %s", key, state.value)

    # ------------------------------------------------------------------
    # Readings
    # ------------------------------------------------------------------

    async def fetch_reading(self, query: str) -> AQIReading:
        """Current reading for a place name.

        Args:
            query: Free-text place name, normalized before use

        Returns:
            A reading tagged live, stale-cache or synthetic
        """
        name = self.normalizer.normalize(query)
        key = self.normalizer.cache_key(query)
        term = self.normalizer.upstream_term(query)
        return await self.inflight.run(
            f"{CacheConfig.NAMESPACE_READING}:{key}",
            lambda: self._retrieve(
                key,
                request=lambda: self.upstream.fetch_feed(term),
                fallback_name=name,
                fallback_coordinates=None,
            ),
        )

    async def fetch_reading_by_coordinates(self, lat: float, lng: float) -> AQIReading:
        """Current reading for a coordinate pair.

        Live readings report the requested coordinates rather than the
        station's; synthetic ones are named "Current Location".
        """
        key = self.normalizer.coordinate_key(lat, lng)
        return await self.inflight.run(
            f"{CacheConfig.NAMESPACE_READING}:{key}",
            lambda: self._retrieve(
                key,
                request=lambda: self.upstream.fetch_geo_feed(lat, lng),
                fallback_name=LocationDefaults.CURRENT_LOCATION_NAME,
                fallback_coordinates=(lat, lng),
            ),
        )

    def _cached_reading(self, payload: Any, key: str) -> AQIReading | None:
        if payload is None:
            return None
        try:
            return AQIReading.model_validate(payload)
        except ValidationError:
            logger.warning("Ignoring cached reading with unexpected shape for %s", key)
            return None

    async def _retrieve(
        self,
        key: str,
        *,
        request: Callable[[], Awaitable[Any]],
        fallback_name: str,
        fallback_coordinates: tuple[float, float] | None,
    ) -> AQIReading:
        namespace = CacheConfig.NAMESPACE_READING

        cached = self._cached_reading(self.cache.get(namespace, key), key)
        if cached is not None:
            self._enter(RetrievalState.CACHE_FRESH, key)
            return cached

        if not self.upstream.is_configured:
            self._enter(RetrievalState.UNCONFIGURED, key)
            stale = self._stale_reading(key)
            if stale is not None:
                return stale
            return self._synthesize(key, fallback_name, fallback_coordinates)

        self._enter(RetrievalState.NETWORK_ATTEMPT, key)
        reading = await self._attempt(key, request, fallback_coordinates)
        if reading is not None:
            self.cache.set(namespace, key, reading.model_dump(mode="json"))
            return reading

        self._enter(RetrievalState.NETWORK_FAILURE, key)
        stale = self._stale_reading(key)
        if stale is not None:
            return stale
        return self._synthesize(key, fallback_name, fallback_coordinates)

    def _stale_reading(self, key: str) -> AQIReading | None:
        """Last stored reading for ``key`` regardless of age.

        Live readings come back tagged ``stale-cache``; a stored synthetic
        reading keeps its ``synthetic`` tag.
        """
        payload = self.cache.get_stale(CacheConfig.NAMESPACE_READING, key)
        stale = self._cached_reading(payload, key)
        if stale is None:
            return None
        self._enter(RetrievalState.STALE_FALLBACK, key)
        if stale.source is ReadingSource.SYNTHETIC:
            logger.warning("Serving previous synthetic reading for %s", key)
            return stale
        logger.warning("Serving last known reading for %s", key)
        return stale.with_source(ReadingSource.STALE_CACHE)

    async def _attempt(
        self,
        key: str,
        request: Callable[[], Awaitable[Any]],
        override_coordinates: tuple[float, float] | None,
    ) -> AQIReading | None:
        started = time.perf_counter()
        try:
            payload = await request()
        except (*UPSTREAM_FAILURES, ConfigError) as e:
            log_operation_error(logger, e, additional_context={"key": key}, level=logging.WARNING)
            return None

        decoded = decode_feed(
            payload,
            normalizer=self.normalizer,
            fallback_coordinates=self.synthetic.default_coordinates,
            now=self._clock,
            override_coordinates=override_coordinates,
        )
        if isinstance(decoded, Err):
            log_operation_error(
                logger,
                decoded.to_error("fetch_reading"),
                additional_context={"key": key},
                level=logging.WARNING,
            )
            return None

        reading = decoded.value
        log_operation_success(
            logger,
            "fetch_reading",
            (time.perf_counter() - started) * 1000,
            result_info={"index": reading.index, "location": reading.location_name},
            context={"key": key},
        )
        return reading

    def _synthesize(
        self,
        key: str,
        name: str,
        coordinates: tuple[float, float] | None,
    ) -> AQIReading:
        self._enter(RetrievalState.SYNTHETIC_FALLBACK, key)
        logger.warning("Serving synthetic reading for %s", key)
        reading = self.synthetic.create(name, coordinates)
        self.cache.set(CacheConfig.NAMESPACE_READING, key, reading.model_dump(mode="json"))
        return reading

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search_locations(self, query: str | None) -> list[LocationSuggestion]:
        """Suggestions for a search query.

        Tiers, first non-empty wins: fresh search cache, local gazetteer,
        popular cities, upstream station search. Network failures yield
        an empty list.
        """
        if not query or len(query.strip()) < SearchLimits.MIN_QUERY_LENGTH:
            return []
        key = self.normalizer.search_key(query)
        return await self.inflight.run(
            f"{CacheConfig.NAMESPACE_SEARCH}:{key}",
            lambda: self._search(query.strip(), key),
        )

    def _suggestion(self, entry: GazetteerEntry) -> LocationSuggestion:
        return LocationSuggestion(
            name=self.normalizer.normalize(entry.label),
            coordinates=entry.coordinates,
        )

    def _remember(
        self, key: str, suggestions: list[LocationSuggestion]
    ) -> list[LocationSuggestion]:
        self.cache.set(
            CacheConfig.NAMESPACE_SEARCH,
            key,
            [suggestion.model_dump(mode="json") for suggestion in suggestions],
        )
        return suggestions

    async def _search(self, query: str, key: str) -> list[LocationSuggestion]:
        cached = self.cache.get(CacheConfig.NAMESPACE_SEARCH, key)
        if cached is not None:
            try:
                return [LocationSuggestion.model_validate(item) for item in cached]
            except (TypeError, ValidationError):
                logger.warning("Ignoring malformed cached search results for %s", key)

        local = self.resolver.search(query, SearchLimits.GATEWAY_LOCAL_LIMIT)
        if local:
            return self._remember(key, [self._suggestion(item.entry) for item in local])

        popular = self.resolver.popular_city_matches(query)
        if popular:
            return self._remember(key, [self._suggestion(entry) for entry in popular])

        if not self.upstream.is_configured:
            logger.debug("No local match for %r and no upstream credential", query)
            return []

        try:
            payload = await self.upstream.search(query)
        except (*UPSTREAM_FAILURES, ConfigError) as e:
            log_operation_error(logger, e, additional_context={"key": key}, level=logging.WARNING)
            return []

        decoded = decode_search(payload, normalizer=self.normalizer)
        if isinstance(decoded, Err):
            log_operation_error(
                logger,
                decoded.to_error("search_locations"),
                additional_context={"key": key},
                level=logging.WARNING,
            )
            return []
        return self._remember(key, decoded.value)

    def instant_suggestions(self, query: str | None = None) -> list[LocationSuggestion]:
        """Local-only suggestions; never touches the network or the cache."""
        return [self._suggestion(entry) for entry in self.resolver.instant_suggestions(query)]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        close = getattr(self.upstream, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> AQIGateway:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


def create_gateway(
    settings: Settings,
    *,
    session: aiohttp.ClientSession | None = None,
    rng: random.Random | None = None,
) -> AQIGateway:
    """Wire a gateway from settings.

    Args:
        settings: Application settings
        session: Optional shared aiohttp session
        rng: Random source for synthetic fallbacks
    """
    defaults = settings.geolocation.default_coordinates
    return AQIGateway(
        upstream=WAQIClient(settings.api.waqi, session=session),
        cache=create_cache_store(settings.cache),
        synthetic=SyntheticReadingFactory(rng=rng, default_coordinates=defaults),
    )
