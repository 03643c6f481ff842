"""Tests for the static gazetteer table."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from airscope.core.gazetteer import (
    GAZETTEER,
    Gazetteer,
    GazetteerEntry,
    LocationCategory,
)


def _entry(name: str, city: str, category: LocationCategory) -> GazetteerEntry:
    return GazetteerEntry(
        name=name,
        parent_city=city,
        state="Test State",
        coordinates=(10.0, 20.0),
        category=category,
    )


class TestGazetteerTable:
    def test_every_entry_has_valid_coordinates(self):
        for entry in GAZETTEER:
            lat, lng = entry.coordinates
            assert -90 <= lat <= 90, entry.name
            assert -180 <= lng <= 180, entry.name

    def test_every_entry_has_a_category(self):
        assert all(isinstance(entry.category, LocationCategory) for entry in GAZETTEER)

    def test_label_joins_name_and_parent_city(self):
        entry = _entry("Bandra", "Mumbai", LocationCategory.AREA)
        assert entry.label == "Bandra, Mumbai"

    def test_entries_are_immutable(self):
        with pytest.raises(FrozenInstanceError):
            GAZETTEER[0].name = "Changed"  # type: ignore[misc]


class TestGazetteer:
    def test_defaults_to_builtin_table(self):
        gazetteer = Gazetteer()
        assert len(gazetteer) == len(GAZETTEER)
        assert gazetteer.entries == GAZETTEER

    def test_popular_cities_are_city_entries_in_table_order(self):
        # Given
        gazetteer = Gazetteer()

        # When
        popular = gazetteer.popular_cities()

        # Then
        names = [entry.name for entry in popular]
        assert names[:3] == ["Delhi", "Mumbai", "Bangalore"]
        assert all(entry.category is LocationCategory.CITY for entry in popular)

    def test_popular_names_ignore_non_city_entries(self):
        # Given: an area shares a popular name with a city
        entries = (
            _entry("Alpha", "Alpha", LocationCategory.AREA),
            _entry("Alpha", "Alpha", LocationCategory.CITY),
            _entry("Beta", "Beta", LocationCategory.CITY),
        )

        # When
        gazetteer = Gazetteer(entries, popular_names=frozenset({"Alpha"}))

        # Then
        popular = gazetteer.popular_cities()
        assert len(popular) == 1
        assert popular[0].category is LocationCategory.CITY

    def test_iterates_custom_table(self):
        entries = (_entry("Alpha", "Alpha", LocationCategory.CITY),)
        assert [entry.name for entry in Gazetteer(entries)] == ["Alpha"]
