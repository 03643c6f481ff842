"""Fallback readings used when neither the network nor the cache can answer."""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import datetime, timezone

from airscope.shared.constants import LocationDefaults, SyntheticRanges
from airscope.shared.models import AQIReading, ReadingSource


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SyntheticReadingFactory:
    """Builds plausible readings from a seedable random source.

    Readings are tagged ``synthetic`` so they are never mistaken for
    measurements.

    Args:
        rng: Random source; pass a seeded ``random.Random`` for repeatable output
        clock: Returns the observation time for new readings
        default_coordinates: Used when the caller knows no position
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = _utc_now,
        default_coordinates: tuple[float, float] = LocationDefaults.DEFAULT_COORDINATES,
    ) -> None:
        self.rng = rng or random.Random()
        self._clock = clock
        self.default_coordinates = default_coordinates

    def _draw(self, bounds: tuple[int, int]) -> int:
        low, span = bounds
        return low + self.rng.randrange(span)

    def create(
        self,
        location_name: str,
        coordinates: tuple[float, float] | None = None,
    ) -> AQIReading:
        """Synthesize a reading for a place.

        Args:
            location_name: Normalized label to report
            coordinates: Position of the place, Delhi when omitted

        Returns:
            Reading with index in 50..199 and dominant pollutant pm25
        """
        index = self._draw(SyntheticRanges.INDEX)
        concentrations = {
            key: float(self._draw(bounds)) for key, bounds in SyntheticRanges.IAQI.items()
        }
        return AQIReading(
            index=index,
            dominant_pollutant=SyntheticRanges.DOMINANT,
            pollutant_concentrations=concentrations,
            measured_at=self._clock(),
            coordinates=coordinates or self.default_coordinates,
            location_name=location_name,
            source=ReadingSource.SYNTHETIC,
            timezone=LocationDefaults.DEFAULT_TIMEZONE,
        )
