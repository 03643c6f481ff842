"""
System Configuration Constants

This module contains constants related to application metadata,
time units and on-disk locations.
"""

# =============================================================================
# BASE CONSTANTS (Foundation values used by other constants)
# =============================================================================

# Base time units
BASE_SECOND = 1
BASE_MINUTE = 60 * BASE_SECOND
BASE_HOUR = 60 * BASE_MINUTE

# Milliseconds per second, used for stored cache timestamps
MS_PER_SECOND = 1000


# =============================================================================
# APPLICATION METADATA
# =============================================================================


class Application:
    """Application metadata constants."""

    NAME = "AirScope"
    VERSION = "0.1.0"
    DESCRIPTION = "Air quality lookup for Indian localities"
    USER_AGENT = f"{NAME}/{VERSION}"


# =============================================================================
# FILE AND PATH CONFIGURATION
# =============================================================================


class FileSystem:
    """File system related constants."""

    HOME_DIR = ".airscope"
    CONFIG_DIRECTORY = "config"
    CACHE_DIRECTORY = "cache"
    ENV_FILE = ".env"
    CONFIG_FILE = "config.toml"

    # Cache backends understood by the cache factory
    CACHE_BACKEND_MEMORY = "memory"
    CACHE_BACKEND_FILE = "file"
    CACHE_BACKEND = CACHE_BACKEND_MEMORY


class Logging:
    """Logging defaults."""

    DEFAULT_LEVEL = "INFO"
    DEFAULT_LOGGER_NAME = "airscope"
