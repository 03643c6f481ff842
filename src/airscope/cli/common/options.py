"""
Reusable Typer Options Module

Option definitions shared by the main callback and the commands. Use them
as ``Annotated[<type>, <option>]`` with the default in the signature.
"""

from __future__ import annotations

import typer

from airscope.shared.constants import CLIHelp

verbose_option = typer.Option(
    "--verbose",
    "-v",
    count=True,
    help="Enable verbose output (equivalent to --log-level DEBUG).",
)

log_level_option = typer.Option(
    "--log-level",
    case_sensitive=False,
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: WARNING.",
)

json_output_option = typer.Option(
    "--json",
    help="Enable machine-readable JSON output instead of human-readable format.",
)

version_option = typer.Option(
    "--version",
    "-V",
    help="Show version information and exit.",
    is_eager=True,
)

hours_option = typer.Option("--hours", min=1, max=168, help=CLIHelp.HOURS_OPTION)

seed_option = typer.Option("--seed", help=CLIHelp.SEED_OPTION)

limit_option = typer.Option("--limit", "-l", min=1, help=CLIHelp.LIMIT_OPTION)
