"""CLI error handling decorator.

Wraps command handlers so AirScope errors become exit codes instead of
tracebacks.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from airscope.cli.common.context import get_cli_context
from airscope.cli.common.error_handler import handle_cli_error
from airscope.shared.errors import AirScopeError

F = TypeVar("F", bound=Callable[..., int])


def handle_cli_errors(command_name: str) -> Callable[[F], F]:
    """Decorator for standardized CLI error handling.

    Example:
        >>> @handle_cli_errors("reading")
        ... def handle_reading_command(location: str) -> int:
        ...     return 0
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> int:
            try:
                return func(*args, **kwargs)
            except AirScopeError as e:
                return handle_cli_error(
                    e,
                    command_name,
                    json_output=get_cli_context().json_output,
                )

        return wrapper  # type: ignore[return-value]

    return decorator
