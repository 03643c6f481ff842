"""data.gov.in real-time AQI resource payload models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DataGovRecord(BaseModel):
    """One pollutant observation at one station.

    The resource publishes numbers as strings ("NA" when unavailable), so
    min/max/avg are kept raw here and parsed during grouping.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    station: str
    city: str = ""
    state: str = ""
    agency: str = ""
    last_update: str = ""
    pollutant_id: str
    pollutant_min: str | None = None
    pollutant_max: str | None = None
    pollutant_avg: str | None = None
    pollutant_unit: str | None = None


class DataGovResponse(BaseModel):
    """Envelope of a records page."""

    model_config = ConfigDict(extra="ignore")

    status: str | None = None
    total: int = 0
    count: int = 0
    message: str | None = None
    records: list[DataGovRecord] = Field(default_factory=list)
