"""
CLI Error Handling Utilities

Maps exceptions raised while running a command to exit codes and reports
them either as a JSON envelope or as a short message on stderr.
"""

from __future__ import annotations

import logging

import typer

from airscope.cli.json_formatter import emit_json
from airscope.shared.constants import CLIDefaults
from airscope.shared.errors import AirScopeError, ApplicationError, ErrorCode

logger = logging.getLogger(__name__)

_CONFIG_CODES = frozenset(
    {ErrorCode.CONFIG_MISSING, ErrorCode.CONFIG_INVALID, ErrorCode.CONFIGURATION_ERROR}
)


def exit_code_for(error: Exception) -> int:
    """Exit code for an exception: 2 for configuration problems, else 1."""
    if isinstance(error, ApplicationError) and error.code in _CONFIG_CODES:
        return CLIDefaults.EXIT_CONFIG_ERROR
    return CLIDefaults.EXIT_ERROR


def handle_cli_error(
    error: Exception,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Log and report a command failure.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to report through the JSON envelope

    Returns:
        Exit code for the command
    """
    exit_code = exit_code_for(error)
    if isinstance(error, AirScopeError):
        code = error.code.value
        message = error.message
        logger.error("CLI error in %s: %s", command, message, extra={"context": error.to_dict()})
    else:
        code = ErrorCode.CLI_UNEXPECTED_ERROR.value
        message = f"Unexpected error: {error}"
        logger.exception("Unexpected error in %s", command)

    if json_output:
        emit_json(
            success=False,
            command=command,
            errors=[message],
            data={
                "error_code": code,
                "error_type": type(error).__name__,
                "exit_code": exit_code,
            },
        )
    else:
        typer.echo(f"Error: {message}", err=True)
    return exit_code
