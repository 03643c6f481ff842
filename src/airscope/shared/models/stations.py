"""Government monitoring-station summaries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PollutantStats(BaseModel):
    """Min/max/average of one pollutant at one station."""

    model_config = ConfigDict(frozen=True)

    min: float = 0.0
    max: float = 0.0
    avg: float = 0.0
    unit: str | None = None


class StationSummary(BaseModel):
    """All pollutants reported by one station, with the index they imply."""

    model_config = ConfigDict(frozen=True)

    station: str
    city: str
    state: str
    agency: str = ""
    last_update: str = ""
    pollutants: dict[str, PollutantStats] = Field(default_factory=dict)
    index: int | None = Field(default=None, ge=0, le=500)
    category: str | None = None
    dominant_pollutant: str | None = None
