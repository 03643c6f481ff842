"""Synthetic hourly AQI projection.

This is a heuristic variation model, not a trained forecast. Each hour adds
fixed adjustments for traffic, night, weekends and season, two smooth
weather cycles and a bounded noise term to the current index.
"""

from __future__ import annotations

import math
import random
import re
from collections.abc import Callable
from datetime import datetime, timedelta, timezone, tzinfo
from typing import TYPE_CHECKING

from airscope.core.aqi_calculator import clamp_index
from airscope.shared.constants import LocationDefaults
from airscope.shared.models.forecast import ForecastFactors, ForecastPoint

if TYPE_CHECKING:
    from airscope.shared.models.reading import AQIReading

RUSH_HOUR_ADJUSTMENT = 25
NIGHT_ADJUSTMENT = -20
WEEKEND_ADJUSTMENT = -10
WINTER_ADJUSTMENT = 20
WIND_AMPLITUDE = 15
TEMPERATURE_AMPLITUDE = 10
NOISE_AMPLITUDE = 15

RUSH_HOURS = frozenset(range(7, 11)) | frozenset(range(17, 21))
NIGHT_HOURS = frozenset(range(0, 7)) | frozenset(range(22, 24))
WINTER_MONTHS = frozenset({11, 12, 1, 2, 3})

MAX_CONFIDENCE = 95.0
MIN_CONFIDENCE = 60.0
CONFIDENCE_DECAY = 0.8

_UTC_OFFSET = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def local_zone(offset: str | None) -> tzinfo:
    """Fixed-offset zone for a ``+05:30`` style offset.

    Missing or unparsable offsets fall back to Indian Standard Time.
    """
    for candidate in (offset or "", LocationDefaults.DEFAULT_TIMEZONE):
        match = _UTC_OFFSET.match(candidate.strip())
        if match is None:
            continue
        sign, hours, minutes = match.groups()
        if int(hours) < 24 and int(minutes) < 60:
            delta = timedelta(hours=int(hours), minutes=int(minutes))
            return timezone(-delta if sign == "-" else delta)
    return timezone.utc


class ForecastSynthesizer:
    """Projects a reading forward hour by hour.

    Args:
        rng: Source of the noise term; seed it for repeatable projections
        clock: Start time used when ``project`` gets none
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.rng = rng or random.Random()
        self._clock = clock

    def project(
        self,
        base_reading: AQIReading,
        horizon_hours: int,
        start: datetime | None = None,
    ) -> list[ForecastPoint]:
        """Project ``horizon_hours`` hourly points from a reading.

        Args:
            base_reading: Current reading; its index is the baseline
            horizon_hours: Number of points; non-positive yields none
            start: Time of the first point (defaults to now); hours, weekdays
                and months are read in the reading's local offset

        Returns:
            Points at ``start + i hours`` for i in 0..horizon_hours-1
        """
        start = start or self._clock()
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        start = start.astimezone(local_zone(base_reading.timezone))
        points: list[ForecastPoint] = []

        for offset in range(max(0, horizon_hours)):
            moment = start + timedelta(hours=offset)
            weekend = moment.weekday() >= 5
            rush_hour = moment.hour in RUSH_HOURS and not weekend
            winter = moment.month in WINTER_MONTHS

            variation = 0.0
            if rush_hour:
                variation += RUSH_HOUR_ADJUSTMENT
            if moment.hour in NIGHT_HOURS:
                variation += NIGHT_ADJUSTMENT
            if weekend:
                variation += WEEKEND_ADJUSTMENT
            if winter:
                variation += WINTER_ADJUSTMENT

            wind = math.sin(offset / 8) * WIND_AMPLITUDE
            temperature = math.cos(offset / 12) * TEMPERATURE_AMPLITUDE
            noise = self.rng.uniform(-NOISE_AMPLITUDE, NOISE_AMPLITUDE)

            points.append(
                ForecastPoint(
                    timestamp=moment,
                    index=clamp_index(base_reading.index + variation + wind + temperature + noise),
                    confidence=max(MIN_CONFIDENCE, MAX_CONFIDENCE - CONFIDENCE_DECAY * offset),
                    factors=ForecastFactors(
                        traffic="high" if rush_hour else "low",
                        meteorology="favorable" if wind > 0 else "unfavorable",
                        seasonal="winter_effect" if winter else "normal",
                        weekend=weekend,
                    ),
                )
            )
        return points
