"""Application, logging, forecast and geolocation configuration models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from airscope.shared.constants import Application, LocationDefaults, Logging


class AppSettings(BaseModel):
    """Application metadata and flags."""

    name: str = Field(default=Application.NAME, description="Application name")
    version: str = Field(default=Application.VERSION, description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")


class LoggingSettings(BaseModel):
    """Logging behavior."""

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="Optional JSON log file path")
    console_output: bool = Field(default=True, description="Use rich console output")


class ForecastSettings(BaseModel):
    """Synthetic forecast defaults."""

    default_horizon: int = Field(default=24, gt=0, le=168, description="Hours to project")


class GeolocationSettings(BaseModel):
    """Bounds for acquiring the user's position."""

    timeout: float = Field(default=LocationDefaults.GEOLOCATION_TIMEOUT, gt=0)
    maximum_age: float = Field(
        default=LocationDefaults.GEOLOCATION_MAX_AGE,
        ge=0,
        description="Oldest acceptable cached position in seconds",
    )
    default_latitude: float = Field(
        default=LocationDefaults.DEFAULT_COORDINATES[0], ge=-90, le=90
    )
    default_longitude: float = Field(
        default=LocationDefaults.DEFAULT_COORDINATES[1], ge=-180, le=180
    )

    @property
    def default_coordinates(self) -> tuple[float, float]:
        return (self.default_latitude, self.default_longitude)


__all__ = ["AppSettings", "ForecastSettings", "GeolocationSettings", "LoggingSettings"]
