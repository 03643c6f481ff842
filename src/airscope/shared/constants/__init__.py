"""
AirScope Constants Module

Centralized constants for the AirScope application, grouped by concern.
"""

from .api import DataGovConfig, LocationDefaults, SearchLimits, WAQIConfig
from .cache import CacheConfig
from .cli import CLICommands, CLIDefaults, CLIHelp, CLIMessages
from .http_codes import HTTPStatusCodes
from .pollutants import Pollutant, SyntheticRanges
from .system import (
    BASE_HOUR,
    BASE_MINUTE,
    BASE_SECOND,
    MS_PER_SECOND,
    Application,
    FileSystem,
    Logging,
)

__all__ = [
    "BASE_HOUR",
    "BASE_MINUTE",
    "BASE_SECOND",
    "MS_PER_SECOND",
    "Application",
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "CacheConfig",
    "DataGovConfig",
    "FileSystem",
    "HTTPStatusCodes",
    "LocationDefaults",
    "Logging",
    "Pollutant",
    "SearchLimits",
    "SyntheticRanges",
    "WAQIConfig",
]
