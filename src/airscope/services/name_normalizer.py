"""Location-name normalization and cache-key derivation."""

from __future__ import annotations

import logging
import re

from airscope.shared.constants import LocationDefaults

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")

_MAX_SEGMENTS = 2


class NameNormalizer:
    """Collapses raw place names into canonical labels and cache keys.

    Upstream station names often repeat segments ("Delhi, Delhi, Delhi")
    or carry long administrative tails. A normalized label keeps at most two
    unique comma-separated segments.

    Args:
        placeholder: Label returned for empty input.
    """

    def __init__(self, placeholder: str = LocationDefaults.UNKNOWN_NAME) -> None:
        self.placeholder = placeholder

    def normalize(self, raw: str | None) -> str:
        """Normalize a place name.

        Splits on commas, trims each segment, drops empty and duplicate
        segments (first occurrence wins) and joins the first two remaining
        segments with ", ". Idempotent.

        Args:
            raw: Arbitrary place-name text

        Returns:
            Canonical label, or the placeholder when nothing remains
        """
        if not raw:
            return self.placeholder

        seen: set[str] = set()
        unique_parts: list[str] = []
        for part in raw.split(","):
            segment = part.strip()
            if segment and segment not in seen:
                seen.add(segment)
                unique_parts.append(segment)

        if not unique_parts:
            return self.placeholder
        return ", ".join(unique_parts[:_MAX_SEGMENTS])

    def cache_key(self, raw: str | None) -> str:
        """Reading-cache key: normalized label, lower-cased, whitespace runs as '_'."""
        return _WHITESPACE_RUN.sub("_", self.normalize(raw).lower())

    def search_key(self, query: str) -> str:
        """Search-cache key for a raw query."""
        return _WHITESPACE_RUN.sub("_", query.strip().lower())

    def coordinate_key(self, lat: float, lng: float) -> str:
        """Reading-cache key for a coordinate pair, rounded to 4 decimals."""
        return f"{lat:.4f},{lng:.4f}"

    def upstream_term(self, raw: str | None) -> str:
        """Term sent to the feed endpoint for a place name.

        The feed endpoint resolves single place names best, so only the
        leading segment of the normalized label is sent ("Bandra, Mumbai"
        becomes "Bandra").
        """
        term = self.normalize(raw).split(",")[0].strip()
        logger.debug("Upstream term for %r is %r", raw, term)
        return term


_default_normalizer = NameNormalizer()


def normalize_location_name(raw: str | None) -> str:
    """Module-level shortcut for NameNormalizer().normalize."""
    return _default_normalizer.normalize(raw)
