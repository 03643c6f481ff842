"""Protocol interfaces shared across layers."""

from .services import AirQualityUpstream, KeyValueStore

__all__ = ["AirQualityUpstream", "KeyValueStore"]
