"""Configuration package for AirScope.

Usage:
    >>> from airscope.config import get_config
    >>> settings = get_config()
    >>> timeout = settings.api.waqi.reading_timeout
"""

from airscope.config.loader import SettingsLoader, get_config, load_settings, reload_config
from airscope.config.models import (
    APISettings,
    AppSettings,
    CacheSettings,
    DataGovSettings,
    ForecastSettings,
    GeolocationSettings,
    LoggingSettings,
    Settings,
    WAQISettings,
)

__all__ = [
    "APISettings",
    "AppSettings",
    "CacheSettings",
    "DataGovSettings",
    "ForecastSettings",
    "GeolocationSettings",
    "LoggingSettings",
    "Settings",
    "SettingsLoader",
    "WAQISettings",
    "get_config",
    "load_settings",
    "reload_config",
]
