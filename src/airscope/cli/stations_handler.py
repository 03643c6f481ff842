"""Government station records command handler."""

from __future__ import annotations

import asyncio

from rich.console import Console

from airscope.cli.common.console import get_console, new_table, styled_category
from airscope.cli.common.context import get_cli_context
from airscope.cli.common.error_decorator import handle_cli_errors
from airscope.cli.json_formatter import emit_json
from airscope.config import get_config
from airscope.services.cache_store import create_cache_store
from airscope.services.datagov_client import DataGovClient
from airscope.shared.constants import CLICommands, CLIDefaults, CLIMessages, Pollutant
from airscope.shared.models import StationSummary


async def _fetch(city: str | None, limit: int) -> list[StationSummary]:
    settings = get_config()
    client = DataGovClient(settings.api.datagov, cache=create_cache_store(settings.cache))
    async with client:
        return await client.fetch_stations(city, limit)


def print_stations(stations: list[StationSummary], console: Console) -> None:
    if not stations:
        console.print(CLIMessages.NO_STATIONS)
        return
    table = new_table(
        "Monitoring stations",
        "Station",
        "City",
        "State",
        "AQI",
        "Category",
        "Dominant",
        "Updated",
    )
    for station in stations:
        dominant = station.dominant_pollutant or "-"
        table.add_row(
            station.station,
            station.city,
            station.state,
            "-" if station.index is None else str(station.index),
            styled_category(station.category),
            Pollutant.DISPLAY_NAMES.get(dominant, dominant),
            station.last_update,
        )
    console.print(table)


@handle_cli_errors(CLICommands.STATIONS)
def handle_stations_command(city: str | None, limit: int) -> int:
    """List stations with the index computed from their averages."""
    stations = asyncio.run(_fetch(city, limit))
    if get_cli_context().json_output:
        warnings = [] if stations else [CLIMessages.NO_STATIONS]
        emit_json(True, CLICommands.STATIONS, data=stations, warnings=warnings)
    else:
        print_stations(stations, get_console())
    return CLIDefaults.EXIT_SUCCESS
