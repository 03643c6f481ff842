"""Tests for the reading model helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from airscope.shared.models import AQIReading, ReadingSource


def _reading(index: int = 150) -> AQIReading:
    return AQIReading(
        index=index,
        dominant_pollutant="pm25",
        pollutant_concentrations={"pm25": 150.0},
        measured_at=datetime(2026, 1, 15, 7, 0, tzinfo=timezone.utc),
        coordinates=(28.6139, 77.209),
        location_name="Delhi",
        source=ReadingSource.LIVE,
    )


class TestAQIReading:
    @pytest.mark.parametrize(("threshold", "expected"), [(100, True), (150, False), (200, False)])
    def test_exceeds_threshold(self, threshold, expected):
        assert _reading(150).exceeds(threshold) is expected

    @pytest.mark.parametrize(
        ("index", "category"),
        [
            (50, "Good"),
            (100, "Satisfactory"),
            (200, "Moderate"),
            (301, "Very Poor"),
            (500, "Severe"),
        ],
    )
    def test_category(self, index, category):
        assert _reading(index).category == category

    def test_with_source_returns_copy(self):
        # Given
        reading = _reading()

        # When
        stale = reading.with_source(ReadingSource.STALE_CACHE)

        # Then
        assert stale.source is ReadingSource.STALE_CACHE
        assert reading.source is ReadingSource.LIVE
        assert stale.index == reading.index

    @pytest.mark.parametrize("index", [-1, 501])
    def test_index_outside_scale_is_rejected(self, index):
        with pytest.raises(ValidationError):
            _reading(index)
