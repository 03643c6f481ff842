"""Reading and forecast command handlers."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable

from rich.console import Console

from airscope.cli.common.console import get_console, new_table, source_note, styled_category
from airscope.cli.common.context import get_cli_context
from airscope.cli.common.error_decorator import handle_cli_errors
from airscope.cli.json_formatter import emit_json
from airscope.config import get_config
from airscope.core.forecast import ForecastSynthesizer
from airscope.services.aqi_gateway import AQIGateway, create_gateway
from airscope.shared.constants import CLICommands, CLIDefaults, Pollutant
from airscope.shared.models import AQIReading, ForecastPoint, ReadingSource

logger = logging.getLogger(__name__)


async def _with_gateway(action: Callable[[AQIGateway], Awaitable[AQIReading]]) -> AQIReading:
    async with create_gateway(get_config()) as gateway:
        return await action(gateway)


def _warnings_for(reading: AQIReading) -> list[str]:
    if reading.source is ReadingSource.LIVE:
        return []
    return [source_note(reading.source.value)]


def _reading_data(reading: AQIReading) -> dict:
    data = reading.model_dump(mode="json")
    data["category"] = reading.category
    return data


def print_reading(reading: AQIReading, console: Console) -> None:
    """Render a reading as a summary table plus a pollutant table."""
    summary = new_table(reading.location_name, "Field", "Value")
    summary.add_row("AQI", str(reading.index))
    summary.add_row("Category", styled_category(reading.category))
    summary.add_row(
        "Dominant pollutant",
        Pollutant.DISPLAY_NAMES.get(reading.dominant_pollutant, reading.dominant_pollutant),
    )
    summary.add_row("Measured at", reading.measured_at.isoformat())
    summary.add_row("Coordinates", f"{reading.coordinates[0]:.4f}, {reading.coordinates[1]:.4f}")
    summary.add_row("Source", source_note(reading.source.value))
    if reading.station_url:
        summary.add_row("Station", reading.station_url)
    console.print(summary)

    if reading.pollutant_concentrations:
        pollutants = new_table("Pollutants", "Pollutant", "Value")
        for key, value in sorted(reading.pollutant_concentrations.items()):
            pollutants.add_row(Pollutant.DISPLAY_NAMES.get(key, key), f"{value:g}")
        console.print(pollutants)


def _report(command: str, reading: AQIReading) -> int:
    if get_cli_context().json_output:
        emit_json(True, command, data=_reading_data(reading), warnings=_warnings_for(reading))
    else:
        print_reading(reading, get_console())
    return CLIDefaults.EXIT_SUCCESS


@handle_cli_errors(CLICommands.READING)
def handle_reading_command(location: str) -> int:
    """Fetch and print the reading for a place name."""
    reading = asyncio.run(_with_gateway(lambda gateway: gateway.fetch_reading(location)))
    return _report(CLICommands.READING, reading)


@handle_cli_errors(CLICommands.COORDS)
def handle_coords_command(lat: float, lng: float) -> int:
    """Fetch and print the reading for a coordinate pair."""
    reading = asyncio.run(
        _with_gateway(lambda gateway: gateway.fetch_reading_by_coordinates(lat, lng))
    )
    return _report(CLICommands.COORDS, reading)


def print_forecast(reading: AQIReading, points: list[ForecastPoint], console: Console) -> None:
    table = new_table(
        f"Projection for {reading.location_name} (from AQI {reading.index})",
        "Time",
        "AQI",
        "Confidence",
        "Traffic",
        "Weather",
        "Season",
    )
    for point in points:
        table.add_row(
            point.timestamp.strftime("%a %H:%M"),
            str(point.index),
            f"{point.confidence:.0f}%",
            point.factors.traffic,
            point.factors.meteorology,
            point.factors.seasonal,
        )
    console.print(table)
    console.print("[dim]Heuristic variation model, not a trained forecast.[/dim]")


@handle_cli_errors(CLICommands.FORECAST)
def handle_forecast_command(location: str, hours: int, seed: int | None = None) -> int:
    """Print a synthetic hourly projection from the current reading."""
    reading = asyncio.run(_with_gateway(lambda gateway: gateway.fetch_reading(location)))
    synthesizer = ForecastSynthesizer(rng=random.Random(seed))
    points = synthesizer.project(reading, hours)
    logger.debug("Projected %d hours for %s", len(points), reading.location_name)

    if get_cli_context().json_output:
        emit_json(
            True,
            CLICommands.FORECAST,
            data={"base": _reading_data(reading), "points": points},
            warnings=_warnings_for(reading),
        )
    else:
        print_forecast(reading, points, get_console())
    return CLIDefaults.EXIT_SUCCESS
