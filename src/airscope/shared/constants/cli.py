"""
CLI Constants

Command names, help text and formatting values for the typer app.
"""

from .system import Application


class CLICommands:
    """Command names."""

    READING = "reading"
    COORDS = "coords"
    SEARCH = "search"
    SUGGEST = "suggest"
    FORECAST = "forecast"
    STATIONS = "stations"
    CACHE = "cache"
    CACHE_PURGE = "purge"
    CACHE_CLEAR = "clear"


class CLIDefaults:
    """Defaults and exit codes."""

    VERSION = Application.VERSION
    FORECAST_HOURS = 24
    STATIONS_LIMIT = 100

    EXIT_SUCCESS = 0
    EXIT_ERROR = 1
    EXIT_CONFIG_ERROR = 2


class CLIHelp:
    """Help strings."""

    APP_NAME = "airscope"
    APP_DESCRIPTION = "Air quality readings, search and forecasts for Indian localities."
    APP_STYLE = "rich"
    VERSION_TEXT = "AirScope v{version}"

    READING_HELP = "Fetch the current reading for a place name."
    COORDS_HELP = "Fetch the current reading for a latitude/longitude pair."
    SEARCH_HELP = "Search known localities, falling back to the upstream search."
    SUGGEST_HELP = "Instant suggestions from the local gazetteer only."
    FORECAST_HELP = (
        "Synthetic hourly projection from the current reading "
        "(heuristic variation model, not a trained forecast)."
    )
    STATIONS_HELP = "List government monitoring stations with computed AQI."
    CACHE_HELP = "Inspect and maintain the local cache."
    CACHE_PURGE_HELP = "Remove expired cache entries."
    CACHE_CLEAR_HELP = "Remove all cache entries."

    LOCATION_ARG = "Place name, e.g. 'Bandra, Mumbai'"
    QUERY_ARG = "Search text (at least two characters)"
    HOURS_OPTION = "Number of hours to project"
    SEED_OPTION = "Seed for the noise term, for repeatable output"
    LIMIT_OPTION = "Maximum number of records to request"


class CLIMessages:
    """User-facing messages."""

    NO_RESULTS = "No matching locations."
    NO_STATIONS = "No stations returned."
    SOURCE_NOTE = {
        "live": "live data",
        "stale-cache": "upstream unavailable, showing last known data",
        "synthetic": "upstream unavailable, showing estimated data",
    }
    PURGED = "Removed {count} expired cache entries."
    CLEARED = "Removed {count} cache entries."
