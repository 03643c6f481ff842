"""Shared data models for AirScope."""

from .forecast import ForecastFactors, ForecastPoint
from .reading import AQIReading, LocationSuggestion, ReadingSource
from .stations import PollutantStats, StationSummary

__all__ = [
    "AQIReading",
    "ForecastFactors",
    "ForecastPoint",
    "LocationSuggestion",
    "PollutantStats",
    "ReadingSource",
    "StationSummary",
]
