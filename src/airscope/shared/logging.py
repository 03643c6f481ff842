"""
Structured logging for AirScope.

Helpers that attach error codes, operation names and masked context to log
records, plus a logger factory with a rich console handler and an optional
JSON-lines file handler.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from airscope.shared.constants import Logging
from airscope.shared.errors import AirScopeError, ErrorContext


class StructuredFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    _EXTRA_FIELDS = ("error_code", "context", "operation", "duration_ms", "result_info")

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created,
                tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in self._EXTRA_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _create_rich_console() -> Console:
    custom_theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red bold reverse",
            "log.time": "dim cyan",
        }
    )
    return Console(theme=custom_theme, stderr=True)


def setup_structured_logger(
    name: str = Logging.DEFAULT_LOGGER_NAME,
    level: str = Logging.DEFAULT_LEVEL,
    log_file: str | None = None,
    *,
    use_rich_console: bool = True,
) -> logging.Logger:
    """Configure a logger for console and optional JSON file output.

    Args:
        name: Logger name (default: "airscope")
        level: Log level name
        log_file: Optional path for a JSON-lines log file
        use_rich_console: Use RichHandler for the console, else JSON to stderr

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)

    # Re-running setup (e.g. per CLI invocation) must not stack handlers
    if logger.handlers:
        logger.handlers.clear()

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    if use_rich_console:
        handler: logging.Handler = RichHandler(
            console=_create_rich_console(),
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%H:%M:%S]",
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
    handler.setLevel(log_level)
    logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def _context_to_dict(context: dict[str, Any] | ErrorContext | None) -> dict[str, Any]:
    if context is None:
        return {}
    if isinstance(context, ErrorContext):
        return context.safe_dict()
    return dict(context)


def log_operation_error(
    logger: logging.Logger,
    error: AirScopeError,
    operation: str | None = None,
    additional_context: dict[str, Any] | ErrorContext | None = None,
    *,
    level: int = logging.ERROR,
) -> None:
    """Log an AirScopeError with its code and masked context.

    Args:
        logger: Logger instance
        error: The error to record
        operation: Operation name; defaults to the error context's operation
        additional_context: Extra context merged over the error's own
        level: Log level; fallback-triggering failures are logged as warnings
    """
    context_dict = error.context.safe_dict()
    context_dict.update(_context_to_dict(additional_context))

    logger.log(
        level,
        error.message,
        extra={
            "error_code": error.code.name,
            "context": context_dict,
            "operation": operation or error.context.operation,
        },
        exc_info=error.original_error is not None and level >= logging.ERROR,
    )


def log_operation_success(
    logger: logging.Logger,
    operation: str,
    duration_ms: float,
    result_info: dict[str, Any] | None = None,
    context: dict[str, Any] | ErrorContext | None = None,
) -> None:
    """Log completion of an operation at debug level."""
    logger.debug(
        "Operation '%s' completed in %.1fms",
        operation,
        duration_ms,
        extra={
            "operation": operation,
            "duration_ms": duration_ms,
            "result_info": result_info or {},
            "context": _context_to_dict(context),
        },
    )


def log_api_call(
    logger: logging.Logger,
    endpoint: str,
    method: str = "GET",
    status_code: int | None = None,
    duration_ms: float | None = None,
    context: dict[str, Any] | None = None,
) -> None:
    """Log an upstream API call.

    Calls answered with a status of 400 or above are logged as warnings,
    everything else at debug level.
    """
    api_context: dict[str, Any] = {"endpoint": endpoint, "method": method}
    if status_code is not None:
        api_context["status_code"] = status_code
    if duration_ms is not None:
        api_context["duration_ms"] = round(duration_ms, 1)
    if context:
        api_context.update(context)

    level = logging.DEBUG
    message = f"API call to {endpoint}"
    if status_code is not None:
        if status_code >= 400:
            level = logging.WARNING
            message += f" failed with status {status_code}"
        else:
            message += f" succeeded with status {status_code}"

    logger.log(
        level,
        message,
        extra={"operation": "api_call", "context": api_context},
    )
