"""Tests for fallback reading synthesis."""

from __future__ import annotations

import random
from datetime import datetime, timezone

from airscope.services.synthetic import SyntheticReadingFactory
from airscope.shared.models import ReadingSource

NOON = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestSyntheticReadingFactory:
    def test_reading_is_tagged_and_plausible(self):
        # Given
        factory = SyntheticReadingFactory(rng=random.Random(1), clock=lambda: NOON)

        # When
        reading = factory.create("Pune")

        # Then
        assert reading.source is ReadingSource.SYNTHETIC
        assert 50 <= reading.index <= 199
        assert reading.dominant_pollutant == "pm25"
        assert reading.location_name == "Pune"
        assert reading.measured_at == NOON
        assert reading.timezone == "+05:30"

    def test_concentrations_within_ranges(self):
        factory = SyntheticReadingFactory(rng=random.Random(5))

        for _ in range(50):
            values = factory.create("X").pollutant_concentrations
            assert {"pm25", "pm10", "o3", "no2", "so2", "co"} <= set(values)
            assert 20 <= values["pm25"] < 100
            assert 30 <= values["pm10"] < 150

    def test_defaults_to_configured_coordinates(self):
        factory = SyntheticReadingFactory(default_coordinates=(19.076, 72.8777))
        assert factory.create("Somewhere").coordinates == (19.076, 72.8777)

    def test_explicit_coordinates_win(self):
        factory = SyntheticReadingFactory()
        assert factory.create("Here", (12.97, 77.59)).coordinates == (12.97, 77.59)

    def test_seeded_factories_agree(self):
        first = SyntheticReadingFactory(rng=random.Random(9), clock=lambda: NOON)
        second = SyntheticReadingFactory(rng=random.Random(9), clock=lambda: NOON)

        assert first.create("A").model_dump() == second.create("A").model_dump()
