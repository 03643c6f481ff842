"""Air-quality reading models returned by the gateway."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from airscope.core.aqi_calculator import MAX_INDEX, MIN_INDEX, category_for


class ReadingSource(str, Enum):
    """How a reading was obtained; the only reliability signal callers get."""

    LIVE = "live"
    STALE_CACHE = "stale-cache"
    SYNTHETIC = "synthetic"


class AQIReading(BaseModel):
    """A single air-quality observation for a place.

    Readings are immutable; a newer fetch supersedes a reading rather than
    modifying it. ``pollutant_concentrations`` holds the per-pollutant values
    as reported by the provider.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=MIN_INDEX, le=MAX_INDEX, description="Overall AQI")
    dominant_pollutant: str = Field(..., description="Pollutant that sets the index")
    pollutant_concentrations: dict[str, float] = Field(default_factory=dict)
    measured_at: datetime = Field(..., description="Observation time (UTC)")
    coordinates: tuple[float, float] = Field(..., description="(lat, lng)")
    location_name: str = Field(..., description="Normalized location label")
    source: ReadingSource = Field(..., description="Reliability tag")
    station_url: str | None = Field(default=None, description="Provider station page")
    timezone: str | None = Field(default=None, description="Station UTC offset")

    @property
    def category(self) -> str:
        """CPCB category name for the index."""
        return category_for(self.index)

    def exceeds(self, threshold: int) -> bool:
        """True when the index is above an alert threshold."""
        return self.index > threshold

    def with_source(self, source: ReadingSource) -> AQIReading:
        """Copy of this reading carrying a different source tag."""
        return self.model_copy(update={"source": source})


class LocationSuggestion(BaseModel):
    """A place offered in response to a search query."""

    model_config = ConfigDict(frozen=True)

    name: str
    coordinates: tuple[float, float]


__all__ = ["AQIReading", "LocationSuggestion", "ReadingSource"]
