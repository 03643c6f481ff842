"""Tests for location-name normalization and key derivation."""

from __future__ import annotations

import pytest

from airscope.services.name_normalizer import NameNormalizer, normalize_location_name


@pytest.fixture
def normalizer() -> NameNormalizer:
    return NameNormalizer()


class TestNormalize:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Delhi, Delhi, Delhi", "Delhi"),
            ("Bandra, Mumbai, Maharashtra, India", "Bandra, Mumbai"),
            ("  Bandra ,Mumbai  ", "Bandra, Mumbai"),
            ("Anand Vihar, , Delhi", "Anand Vihar, Delhi"),
            ("Delhi, Delhi, India", "Delhi, India"),
            ("Kolkata", "Kolkata"),
        ],
    )
    def test_collapses_segments(self, normalizer, raw, expected):
        assert normalizer.normalize(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", ", ,", ","])
    def test_empty_input_returns_placeholder(self, normalizer, raw):
        assert normalizer.normalize(raw) == "Unknown Location"

    def test_custom_placeholder(self):
        assert NameNormalizer(placeholder="Somewhere").normalize("") == "Somewhere"

    @pytest.mark.parametrize(
        "raw",
        ["Delhi, Delhi, Delhi", "a,b,c,d", "  x , y ", "Bandra, Mumbai", ""],
    )
    def test_idempotent(self, normalizer, raw):
        once = normalizer.normalize(raw)
        assert normalizer.normalize(once) == once

    def test_duplicates_are_case_sensitive(self, normalizer):
        assert normalizer.normalize("Delhi, delhi") == "Delhi, delhi"

    def test_module_shortcut(self):
        assert normalize_location_name("Pune, Pune") == "Pune"


class TestKeys:
    def test_cache_key_lowercases_and_joins_whitespace(self, normalizer):
        assert normalizer.cache_key("Bandra,  Mumbai") == "bandra,_mumbai"

    def test_cache_key_matches_for_equivalent_names(self, normalizer):
        assert normalizer.cache_key("Delhi, Delhi") == normalizer.cache_key("  Delhi ")

    def test_cache_key_for_empty_input(self, normalizer):
        assert normalizer.cache_key(None) == "unknown_location"

    def test_search_key(self, normalizer):
        assert normalizer.search_key("  New   Delhi ") == "new_delhi"

    def test_coordinate_key_rounds_to_four_decimals(self, normalizer):
        assert normalizer.coordinate_key(28.613912, 77.2) == "28.6139,77.2000"

    def test_nearby_coordinates_share_a_key(self, normalizer):
        assert normalizer.coordinate_key(19.07601, 72.87769) == normalizer.coordinate_key(
            19.07599, 72.87771
        )


class TestUpstreamTerm:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Bandra, Mumbai", "Bandra"),
            ("Delhi, Delhi, Delhi", "Delhi"),
            ("  Pune  ", "Pune"),
        ],
    )
    def test_first_segment_is_sent(self, normalizer, raw, expected):
        assert normalizer.upstream_term(raw) == expected
