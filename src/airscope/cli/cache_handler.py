"""Cache maintenance command handlers."""

from __future__ import annotations

from airscope.cli.common.console import get_console
from airscope.cli.common.context import get_cli_context
from airscope.cli.common.error_decorator import handle_cli_errors
from airscope.cli.json_formatter import emit_json
from airscope.config import get_config
from airscope.services.cache_store import create_cache_store
from airscope.shared.constants import CLICommands, CLIDefaults, CLIMessages


def _report(command: str, count: int, message: str) -> int:
    if get_cli_context().json_output:
        emit_json(True, f"{CLICommands.CACHE} {command}", data={"removed": count})
    else:
        get_console().print(message.format(count=count))
    return CLIDefaults.EXIT_SUCCESS


@handle_cli_errors(f"{CLICommands.CACHE} {CLICommands.CACHE_PURGE}")
def handle_cache_purge_command() -> int:
    """Remove entries past their lifetime."""
    removed = create_cache_store(get_config().cache).purge_expired()
    return _report(CLICommands.CACHE_PURGE, removed, CLIMessages.PURGED)


@handle_cli_errors(f"{CLICommands.CACHE} {CLICommands.CACHE_CLEAR}")
def handle_cache_clear_command() -> int:
    """Remove every entry."""
    removed = create_cache_store(get_config().cache).clear()
    return _report(CLICommands.CACHE_CLEAR, removed, CLIMessages.CLEARED)
