"""Tests for the cache-first retrieval gateway."""

from __future__ import annotations

import asyncio

import pytest
from conftest import FakeUpstream, make_feed_payload

from airscope.config.models import Settings
from airscope.services.aqi_gateway import AQIGateway, create_gateway
from airscope.services.waqi_client import WAQIClient
from airscope.shared.errors import (
    ErrorCode,
    TransportError,
    create_config_error,
    create_timeout_error,
)
from airscope.shared.models import AQIReading, ReadingSource

DELHI = (28.6139, 77.2090)


def _timeout() -> Exception:
    return create_timeout_error("https://api.waqi.info/feed/Delhi/", 8.0, "fetch_feed")


class TestFetchReading:
    @pytest.mark.asyncio
    async def test_live_reading_is_returned_and_cached(self, gateway, upstream, cache):
        # Given
        upstream.fetch_feed.return_value = make_feed_payload(name="Mumbai", aqi=87)

        # When
        reading = await gateway.fetch_reading("Mumbai")

        # Then
        assert reading.source is ReadingSource.LIVE
        assert reading.index == 87
        assert reading.location_name == "Mumbai"
        upstream.fetch_feed.assert_awaited_once_with("Mumbai")
        assert cache.get("aqi_cache", "mumbai")["index"] == 87

    @pytest.mark.asyncio
    async def test_fresh_cache_skips_network(self, gateway, upstream):
        # Given
        upstream.fetch_feed.return_value = make_feed_payload(name="Mumbai")
        first = await gateway.fetch_reading("Mumbai")

        # When
        second = await gateway.fetch_reading("  Mumbai ")

        # Then
        assert second.model_dump() == first.model_dump()
        upstream.fetch_feed.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_only_first_segment_is_sent_upstream(self, gateway, upstream):
        upstream.fetch_feed.return_value = make_feed_payload(name="Bandra, Mumbai")

        await gateway.fetch_reading("Bandra, Mumbai, Maharashtra")

        upstream.fetch_feed.assert_awaited_once_with("Bandra")

    @pytest.mark.asyncio
    async def test_timeout_degrades_to_synthetic(self, gateway, upstream):
        # Given
        upstream.fetch_feed.side_effect = _timeout()

        # When
        reading = await gateway.fetch_reading("Delhi")

        # Then
        assert reading.source is ReadingSource.SYNTHETIC
        assert 50 <= reading.index < 200
        assert reading.location_name == "Delhi"
        assert reading.coordinates == DELHI
        assert reading.dominant_pollutant == "pm25"

    @pytest.mark.asyncio
    async def test_synthetic_reading_is_cached(self, gateway, upstream):
        # Given
        upstream.fetch_feed.side_effect = _timeout()
        first = await gateway.fetch_reading("Delhi")

        # When
        second = await gateway.fetch_reading("Delhi")

        # Then: the same reading, without another request
        assert second.model_dump() == first.model_dump()
        upstream.fetch_feed.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failure_after_expiry_serves_stale(self, gateway, upstream, clock):
        # Given: a live reading that has since expired
        upstream.fetch_feed.return_value = make_feed_payload(name="Mumbai", aqi=120)
        await gateway.fetch_reading("Mumbai")
        clock.advance(901)
        upstream.fetch_feed.side_effect = TransportError(ErrorCode.NETWORK_ERROR, "offline")

        # When
        reading = await gateway.fetch_reading("Mumbai")

        # Then
        assert reading.source is ReadingSource.STALE_CACHE
        assert reading.index == 120
        assert upstream.fetch_feed.await_count == 2

    @pytest.mark.asyncio
    async def test_expired_entry_is_refreshed_when_upstream_answers(
        self, gateway, upstream, clock
    ):
        upstream.fetch_feed.return_value = make_feed_payload(aqi=100)
        await gateway.fetch_reading("Mumbai")
        clock.advance(901)
        upstream.fetch_feed.return_value = make_feed_payload(aqi=140)

        reading = await gateway.fetch_reading("Mumbai")

        assert reading.source is ReadingSource.LIVE
        assert reading.index == 140

    @pytest.mark.asyncio
    async def test_unconfigured_upstream_is_never_called(self, cache, clock):
        # Given
        upstream = FakeUpstream(configured=False)
        gateway = AQIGateway(upstream, cache=cache, clock=clock.datetime)

        # When
        reading = await gateway.fetch_reading("Pune")

        # Then
        assert reading.source is ReadingSource.SYNTHETIC
        assert reading.location_name == "Pune"
        upstream.fetch_feed.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unconfigured_upstream_serves_stale_before_synthetic(
        self, gateway, upstream, cache, clock
    ):
        # Given: a live reading that has since expired, then the token goes away
        upstream.fetch_feed.return_value = make_feed_payload(name="Mumbai", aqi=120)
        await gateway.fetch_reading("Mumbai")
        clock.advance(901)
        upstream.configured = False

        # When
        reading = await gateway.fetch_reading("Mumbai")

        # Then: the last real reading, still stored as live
        assert reading.source is ReadingSource.STALE_CACHE
        assert reading.index == 120
        assert cache.get_stale("aqi_cache", "mumbai")["source"] == "live"
        upstream.fetch_feed.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_expired_synthetic_reading_keeps_its_tag(self, gateway, upstream, clock):
        # Given: a synthetic fallback that has since expired
        upstream.fetch_feed.side_effect = _timeout()
        first = await gateway.fetch_reading("Delhi")
        clock.advance(901)

        # When: the upstream fails again
        second = await gateway.fetch_reading("Delhi")

        # Then
        assert first.source is ReadingSource.SYNTHETIC
        assert second.source is ReadingSource.SYNTHETIC
        assert second.index == first.index
        assert upstream.fetch_feed.await_count == 2

    @pytest.mark.asyncio
    async def test_non_finite_aqi_degrades_to_synthetic(self, gateway, upstream):
        upstream.fetch_feed.return_value = make_feed_payload(aqi="inf")

        reading = await gateway.fetch_reading("Agra")

        assert reading.source is ReadingSource.SYNTHETIC
        assert 0 <= reading.index <= 500

    @pytest.mark.asyncio
    async def test_config_error_degrades_to_synthetic(self, gateway, upstream):
        upstream.fetch_feed.side_effect = create_config_error("bad token", setting="token")

        reading = await gateway.fetch_reading("Agra")

        assert reading.source is ReadingSource.SYNTHETIC

    @pytest.mark.asyncio
    async def test_offline_station_degrades_to_synthetic(self, gateway, upstream):
        upstream.fetch_feed.return_value = make_feed_payload(aqi="-")

        reading = await gateway.fetch_reading("Agra")

        assert reading.source is ReadingSource.SYNTHETIC

    @pytest.mark.asyncio
    async def test_error_status_degrades_to_synthetic(self, gateway, upstream):
        upstream.fetch_feed.return_value = {"status": "error", "data": "Unknown station"}

        reading = await gateway.fetch_reading("Atlantis")

        assert reading.source is ReadingSource.SYNTHETIC
        assert reading.location_name == "Atlantis"

    @pytest.mark.asyncio
    async def test_malformed_cached_reading_is_ignored(self, gateway, upstream, cache):
        # Given: a cache entry of the wrong shape
        cache.set("aqi_cache", "mumbai", {"unexpected": True})
        upstream.fetch_feed.return_value = make_feed_payload(aqi=61)

        # When
        reading = await gateway.fetch_reading("Mumbai")

        # Then
        assert reading.source is ReadingSource.LIVE
        assert reading.index == 61

    @pytest.mark.asyncio
    async def test_concurrent_requests_share_one_call(self, gateway, upstream):
        # Given
        async def slow_feed(term: str) -> dict:
            await asyncio.sleep(0.01)
            return make_feed_payload(name=term)

        upstream.fetch_feed.side_effect = slow_feed

        # When
        first, second = await asyncio.gather(
            gateway.fetch_reading("Mumbai"),
            gateway.fetch_reading("mumbai"),
        )

        # Then
        assert first == second
        assert upstream.fetch_feed.await_count == 1


class TestFetchReadingByCoordinates:
    @pytest.mark.asyncio
    async def test_requested_coordinates_are_kept(self, gateway, upstream):
        # Given: the nearest station is elsewhere
        upstream.fetch_geo_feed.return_value = make_feed_payload(geo=[19.0, 72.8])

        # When
        reading = await gateway.fetch_reading_by_coordinates(19.1, 72.9)

        # Then
        assert reading.coordinates == (19.1, 72.9)
        assert reading.source is ReadingSource.LIVE
        upstream.fetch_geo_feed.assert_awaited_once_with(19.1, 72.9)

    @pytest.mark.asyncio
    async def test_failure_yields_current_location(self, gateway, upstream):
        upstream.fetch_geo_feed.side_effect = _timeout()

        reading = await gateway.fetch_reading_by_coordinates(12.97, 77.59)

        assert reading.source is ReadingSource.SYNTHETIC
        assert reading.location_name == "Current Location"
        assert reading.coordinates == (12.97, 77.59)

    @pytest.mark.asyncio
    async def test_cached_by_rounded_coordinates(self, gateway, upstream, cache):
        upstream.fetch_geo_feed.return_value = make_feed_payload()

        await gateway.fetch_reading_by_coordinates(19.07601, 72.87769)
        await gateway.fetch_reading_by_coordinates(19.07599, 72.87771)

        upstream.fetch_geo_feed.assert_awaited_once()
        assert cache.get("aqi_cache", "19.0760,72.8777") is not None


class TestSearchLocations:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", [None, "", "a", "  b  "])
    async def test_short_queries_return_nothing(self, gateway, upstream, query):
        assert await gateway.search_locations(query) == []
        upstream.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_local_match_skips_network(self, gateway, upstream):
        # When
        results = await gateway.search_locations("Koramangala")

        # Then
        assert results[0].name == "Koramangala, Bangalore"
        assert results[0].coordinates == (12.9279, 77.6271)
        upstream.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_city_suggestion_collapses_duplicate_label(self, gateway):
        results = await gateway.search_locations("Delhi")
        assert results[0].name == "Delhi"

    @pytest.mark.asyncio
    async def test_local_results_are_cached(self, gateway, cache):
        await gateway.search_locations("Koramangala")

        cached = cache.get("search_cache", "koramangala")

        assert cached[0]["name"] == "Koramangala, Bangalore"

    @pytest.mark.asyncio
    async def test_cached_results_are_served(self, gateway, cache, upstream):
        # Given
        cache.set("search_cache", "zzyzx", [{"name": "Zzyzx", "coordinates": [35.1, -116.1]}])

        # When
        results = await gateway.search_locations("Zzyzx")

        # Then
        assert [(r.name, r.coordinates) for r in results] == [("Zzyzx", (35.1, -116.1))]
        upstream.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_falls_back_to_upstream_search(self, gateway, upstream):
        # Given
        upstream.search.return_value = {
            "status": "ok",
            "data": [{"station": {"name": "Zzyzx, California", "geo": [35.1, -116.1]}}],
        }

        # When
        results = await gateway.search_locations("Zzyzx")

        # Then
        assert [r.name for r in results] == ["Zzyzx, California"]
        upstream.search.assert_awaited_once_with("Zzyzx")

    @pytest.mark.asyncio
    async def test_upstream_failure_returns_nothing(self, gateway, upstream):
        upstream.search.side_effect = _timeout()
        assert await gateway.search_locations("Zzyzx") == []

    @pytest.mark.asyncio
    async def test_empty_upstream_result_returns_nothing(self, gateway, upstream):
        upstream.search.return_value = {"status": "ok", "data": []}
        assert await gateway.search_locations("Zzyzx") == []

    @pytest.mark.asyncio
    async def test_unconfigured_upstream_is_not_searched(self, cache):
        upstream = FakeUpstream(configured=False)
        gateway = AQIGateway(upstream, cache=cache)

        assert await gateway.search_locations("Zzyzx") == []
        upstream.search.assert_not_awaited()


class TestInstantSuggestions:
    def test_blank_query_offers_popular_cities(self, gateway, upstream):
        suggestions = gateway.instant_suggestions()

        assert [s.name for s in suggestions] == [
            "Delhi",
            "Mumbai",
            "Bangalore",
            "Chennai",
            "Kolkata",
        ]

    def test_query_uses_local_search_only(self, gateway, cache):
        suggestions = gateway.instant_suggestions("Koramangala")

        assert suggestions[0].name == "Koramangala, Bangalore"
        assert cache.get("search_cache", "koramangala") is None


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_context_manager_closes_upstream(self, gateway, upstream):
        async with gateway as active:
            assert active is gateway

        upstream.close.assert_awaited_once()

    def test_create_gateway_wires_settings(self):
        # Given
        settings = Settings()

        # When
        gateway = create_gateway(settings)

        # Then
        assert isinstance(gateway.upstream, WAQIClient)
        assert not gateway.upstream.is_configured
        assert gateway.cache.default_ttl == settings.cache.ttl
        assert gateway.synthetic.default_coordinates == DELHI

    def test_readings_are_immutable(self, gateway):
        reading = gateway.synthetic.create("Delhi")

        with pytest.raises(ValueError):
            reading.index = 10  # type: ignore[misc]
        assert isinstance(reading, AQIReading)
