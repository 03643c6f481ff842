"""
Core components for AirScope.

Pure domain logic: the AQI breakpoint tables, the locality gazetteer and
the synthetic forecast model.
"""

from .aqi_calculator import AQICalculator, Breakpoint, OverallIndex, category_for
from .gazetteer import GAZETTEER, Gazetteer, GazetteerEntry, LocationCategory

__all__ = [
    "AQICalculator",
    "Breakpoint",
    "GAZETTEER",
    "Gazetteer",
    "GazetteerEntry",
    "LocationCategory",
    "OverallIndex",
    "category_for",
]
