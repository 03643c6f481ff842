"""Search and suggestion command handlers."""

from __future__ import annotations

import asyncio

from rich.console import Console

from airscope.cli.common.console import get_console, new_table
from airscope.cli.common.context import get_cli_context
from airscope.cli.common.error_decorator import handle_cli_errors
from airscope.cli.json_formatter import emit_json
from airscope.config import get_config
from airscope.services.aqi_gateway import create_gateway
from airscope.shared.constants import CLICommands, CLIDefaults, CLIMessages
from airscope.shared.models import LocationSuggestion


async def _search(query: str) -> list[LocationSuggestion]:
    async with create_gateway(get_config()) as gateway:
        return await gateway.search_locations(query)


def print_suggestions(title: str, suggestions: list[LocationSuggestion], console: Console) -> None:
    if not suggestions:
        console.print(CLIMessages.NO_RESULTS)
        return
    table = new_table(title, "#", "Location", "Latitude", "Longitude")
    for position, suggestion in enumerate(suggestions, start=1):
        lat, lng = suggestion.coordinates
        table.add_row(str(position), suggestion.name, f"{lat:.4f}", f"{lng:.4f}")
    console.print(table)


def _report(command: str, title: str, suggestions: list[LocationSuggestion]) -> int:
    if get_cli_context().json_output:
        emit_json(True, command, data=suggestions)
    else:
        print_suggestions(title, suggestions, get_console())
    return CLIDefaults.EXIT_SUCCESS


@handle_cli_errors(CLICommands.SEARCH)
def handle_search_command(query: str) -> int:
    """Search the gazetteer, popular cities and then the upstream provider."""
    suggestions = asyncio.run(_search(query))
    return _report(CLICommands.SEARCH, f"Results for '{query}'", suggestions)


@handle_cli_errors(CLICommands.SUGGEST)
def handle_suggest_command(query: str | None = None) -> int:
    """Local-only suggestions; no network access."""
    gateway = create_gateway(get_config())
    suggestions = gateway.instant_suggestions(query)
    title = f"Suggestions for '{query}'" if query else "Popular cities"
    return _report(CLICommands.SUGGEST, title, suggestions)
