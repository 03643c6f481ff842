"""Air Quality Index computation from pollutant concentrations.

Implements the Indian National Air Quality Index published by the Central
Pollution Control Board. Each pollutant has six concentration bands mapped
onto AQI ranges; a concentration is converted by linear interpolation inside
its band and the overall index is the highest sub-index.

Concentrations are in µg/m³ except CO, which is in mg/m³.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Mapping, NamedTuple

from airscope.shared.constants import Pollutant
from airscope.shared.errors import ErrorCode, create_validation_error

logger = logging.getLogger(__name__)

MIN_INDEX = 0
MAX_INDEX = 500


@dataclass(frozen=True)
class Breakpoint:
    """A concentration band and the AQI range it maps onto."""

    conc_low: float
    conc_high: float
    aqi_low: int
    aqi_high: int

    def interpolate(self, concentration: float) -> float:
        if concentration <= self.conc_low:
            return float(self.aqi_low)
        slope = (self.aqi_high - self.aqi_low) / (self.conc_high - self.conc_low)
        return self.aqi_low + slope * (concentration - self.conc_low)


def _bands(*rows: tuple[float, float]) -> tuple[Breakpoint, ...]:
    aqi_ranges = ((0, 50), (51, 100), (101, 200), (201, 300), (301, 400), (401, 500))
    return tuple(
        Breakpoint(low, high, aqi_low, aqi_high)
        for (low, high), (aqi_low, aqi_high) in zip(rows, aqi_ranges)
    )


CPCB_BREAKPOINTS: dict[str, tuple[Breakpoint, ...]] = {
    Pollutant.PM25: _bands((0, 30), (31, 60), (61, 90), (91, 120), (121, 250), (251, 500)),
    Pollutant.PM10: _bands((0, 50), (51, 100), (101, 250), (251, 350), (351, 430), (431, 600)),
    Pollutant.NO2: _bands((0, 40), (41, 80), (81, 180), (181, 280), (281, 400), (401, 600)),
    Pollutant.SO2: _bands((0, 40), (41, 80), (81, 380), (381, 800), (801, 1600), (1601, 2400)),
    Pollutant.CO: _bands((0, 1.0), (1.1, 2.0), (2.1, 10), (10.1, 17), (17.1, 34), (34.1, 50)),
    Pollutant.O3: _bands((0, 50), (51, 100), (101, 168), (169, 208), (209, 748), (749, 1000)),
    Pollutant.NH3: _bands(
        (0, 200), (201, 400), (401, 800), (801, 1200), (1201, 1800), (1801, 2400)
    ),
    Pollutant.PB: _bands((0, 0.5), (0.51, 1.0), (1.1, 2.0), (2.1, 3.0), (3.1, 3.5), (3.51, 5.0)),
}

# Upper bound (inclusive) of each category
AQI_CATEGORIES: tuple[tuple[int, str], ...] = (
    (50, "Good"),
    (100, "Satisfactory"),
    (200, "Moderate"),
    (300, "Poor"),
    (400, "Very Poor"),
    (MAX_INDEX, "Severe"),
)


class OverallIndex(NamedTuple):
    """Result of combining several pollutant sub-indices."""

    index: int
    dominant_pollutant: str
    sub_indices: dict[str, int]


def canonical_pollutant(pollutant_id: str) -> str:
    """Map a provider pollutant id ("PM2.5", "OZONE", "pm10") to its canonical key."""
    key = pollutant_id.strip().lower()
    return Pollutant.ALIASES.get(key, key)


def clamp_index(value: float) -> int:
    """Round half-up and clamp into the valid index range.

    Infinite values clamp to the scale ends; NaN is rejected.
    """
    if math.isnan(value):
        raise ValueError("AQI value is NaN")
    bounded = min(float(MAX_INDEX), max(float(MIN_INDEX), value))
    return int(math.floor(bounded + 0.5))


def category_for(index: int) -> str:
    """Return the CPCB category name for an index."""
    for upper, name in AQI_CATEGORIES:
        if index <= upper:
            return name
    return AQI_CATEGORIES[-1][1]


class AQICalculator:
    """Converts pollutant concentrations into AQI values.

    Args:
        breakpoints: Per-pollutant band tables, ordered by concentration.
            Defaults to the CPCB National AQI tables.
    """

    def __init__(
        self,
        breakpoints: Mapping[str, tuple[Breakpoint, ...]] | None = None,
    ) -> None:
        self._breakpoints = dict(breakpoints or CPCB_BREAKPOINTS)

    @property
    def pollutants(self) -> tuple[str, ...]:
        return tuple(self._breakpoints)

    def supports(self, pollutant: str) -> bool:
        return canonical_pollutant(pollutant) in self._breakpoints

    def index_for(self, pollutant: str, concentration: float) -> int:
        """Compute the sub-index for a single pollutant.

        The first band whose upper bound is at or above the concentration is
        used. Concentrations falling in the gap between two published bands
        (e.g. 30.5 µg/m³ PM2.5) take that band's lower AQI bound. Values
        beyond the top band saturate at 500 and negatives are treated as 0.

        Args:
            pollutant: Pollutant id, canonical or provider spelling
            concentration: Measured concentration

        Returns:
            Sub-index in [0, 500]

        Raises:
            DomainError: If the pollutant has no breakpoint table or the
                concentration is not a number
        """
        key = canonical_pollutant(pollutant)
        bands = self._breakpoints.get(key)
        if bands is None:
            raise create_validation_error(
                f"No breakpoint table for pollutant '{pollutant}'",
                field="pollutant",
                operation="index_for",
                code=ErrorCode.UNKNOWN_POLLUTANT,
            )
        if math.isnan(concentration):
            raise create_validation_error(
                f"Concentration for '{pollutant}' is not a number",
                field="concentration",
                operation="index_for",
            )

        value = max(0.0, float(concentration))
        for band in bands:
            if value <= band.conc_high:
                return clamp_index(band.interpolate(value))
        return MAX_INDEX

    def overall_index(self, concentrations: Mapping[str, float]) -> OverallIndex:
        """Combine sub-indices into the overall index.

        Pollutants without a breakpoint table are skipped. On ties the first
        pollutant in mapping order is reported as dominant.

        Raises:
            DomainError: If no supplied pollutant is supported
        """
        sub_indices: dict[str, int] = {}
        best: tuple[int, str] | None = None

        for pollutant, concentration in concentrations.items():
            if not self.supports(pollutant):
                logger.debug("Skipping unsupported pollutant %s", pollutant)
                continue
            key = canonical_pollutant(pollutant)
            sub_index = self.index_for(key, concentration)
            sub_indices[key] = sub_index
            if best is None or sub_index > best[0]:
                best = (sub_index, key)

        if best is None:
            raise create_validation_error(
                "No supported pollutant concentrations supplied",
                field="concentrations",
                operation="overall_index",
            )

        return OverallIndex(best[0], best[1], sub_indices)
