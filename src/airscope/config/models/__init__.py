"""Configuration models."""

from .api_settings import APISettings, DataGovSettings, WAQISettings
from .app_settings import AppSettings, ForecastSettings, GeolocationSettings, LoggingSettings
from .cache_settings import CacheSettings
from .settings import Settings

__all__ = [
    "APISettings",
    "AppSettings",
    "CacheSettings",
    "DataGovSettings",
    "ForecastSettings",
    "GeolocationSettings",
    "LoggingSettings",
    "Settings",
    "WAQISettings",
]
