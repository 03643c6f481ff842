"""
AirScope Typer CLI Application

Entry point for the ``airscope`` command. The main callback parses the
common options, loads the settings and configures logging before any
command runs.
"""

from __future__ import annotations

from typing import Annotated

import typer

from airscope.cli.cache_handler import handle_cache_clear_command, handle_cache_purge_command
from airscope.cli.common.context import CliContext, LogLevel, set_cli_context
from airscope.cli.common.error_handler import handle_cli_error
from airscope.cli.common.options import (
    hours_option,
    json_output_option,
    limit_option,
    log_level_option,
    seed_option,
    verbose_option,
    version_option,
)
from airscope.cli.reading_handler import (
    handle_coords_command,
    handle_forecast_command,
    handle_reading_command,
)
from airscope.cli.search_handler import handle_search_command, handle_suggest_command
from airscope.cli.stations_handler import handle_stations_command
from airscope.config import get_config
from airscope.shared.constants import CLICommands, CLIDefaults, CLIHelp, Logging
from airscope.shared.errors import AirScopeError
from airscope.shared.logging import setup_structured_logger

__version__ = CLIDefaults.VERSION


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit


def _finish(exit_code: int) -> None:
    if exit_code != CLIDefaults.EXIT_SUCCESS:
        raise typer.Exit(exit_code)


app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
)

cache_app = typer.Typer(help=CLIHelp.CACHE_HELP, no_args_is_help=True)
app.add_typer(cache_app, name=CLICommands.CACHE)


@app.callback(invoke_without_command=True)
def main(
    verbose: Annotated[int, verbose_option] = 0,
    log_level: Annotated[LogLevel, log_level_option] = LogLevel.WARNING,
    json_output: Annotated[bool, json_output_option] = False,
    version: Annotated[bool, version_option] = False,
) -> None:
    """Air quality readings, search and forecasts for Indian localities."""
    version_callback(version)

    context = CliContext(verbose=verbose, log_level=log_level, json_output=json_output)
    set_cli_context(context)

    try:
        settings = get_config()
    except AirScopeError as e:
        raise typer.Exit(handle_cli_error(e, "main", json_output=json_output)) from e

    setup_structured_logger(
        Logging.DEFAULT_LOGGER_NAME,
        context.get_effective_log_level(),
        settings.logging.file,
        use_rich_console=settings.logging.console_output,
    )


@app.command(CLICommands.READING, help=CLIHelp.READING_HELP)
def reading_command(
    location: Annotated[str, typer.Argument(help=CLIHelp.LOCATION_ARG)],
) -> None:
    _finish(handle_reading_command(location))


@app.command(CLICommands.COORDS, help=CLIHelp.COORDS_HELP)
def coords_command(
    lat: Annotated[float, typer.Argument(min=-90, max=90, help="Latitude in degrees")],
    lng: Annotated[float, typer.Argument(min=-180, max=180, help="Longitude in degrees")],
) -> None:
    _finish(handle_coords_command(lat, lng))


@app.command(CLICommands.SEARCH, help=CLIHelp.SEARCH_HELP)
def search_command(
    query: Annotated[str, typer.Argument(help=CLIHelp.QUERY_ARG)],
) -> None:
    _finish(handle_search_command(query))


@app.command(CLICommands.SUGGEST, help=CLIHelp.SUGGEST_HELP)
def suggest_command(
    query: Annotated[str | None, typer.Argument(help=CLIHelp.QUERY_ARG)] = None,
) -> None:
    _finish(handle_suggest_command(query))


@app.command(CLICommands.FORECAST, help=CLIHelp.FORECAST_HELP)
def forecast_command(
    location: Annotated[str, typer.Argument(help=CLIHelp.LOCATION_ARG)],
    hours: Annotated[int, hours_option] = CLIDefaults.FORECAST_HOURS,
    seed: Annotated[int | None, seed_option] = None,
) -> None:
    _finish(handle_forecast_command(location, hours, seed))


@app.command(CLICommands.STATIONS, help=CLIHelp.STATIONS_HELP)
def stations_command(
    city: Annotated[str | None, typer.Argument(help="City to filter by")] = None,
    limit: Annotated[int, limit_option] = CLIDefaults.STATIONS_LIMIT,
) -> None:
    _finish(handle_stations_command(city, limit))


@cache_app.command(CLICommands.CACHE_PURGE, help=CLIHelp.CACHE_PURGE_HELP)
def cache_purge_command() -> None:
    _finish(handle_cache_purge_command())


@cache_app.command(CLICommands.CACHE_CLEAR, help=CLIHelp.CACHE_CLEAR_HELP)
def cache_clear_command() -> None:
    _finish(handle_cache_clear_command())


if __name__ == "__main__":
    app()
