"""
JSON Output Formatter for AirScope CLI

Every command run with ``--json`` prints the same envelope:
``{success, timestamp, command, data, errors, warnings}``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import orjson
import typer
from pydantic import BaseModel


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def format_json_output(
    success: bool,
    command: str,
    data: Any | None = None,
    errors: list[str] | None = None,
    warnings: list[str] | None = None,
) -> bytes:
    """
    Format command output as JSON.

    Pydantic models anywhere in ``data`` are dumped in JSON mode. Any error
    forces ``success`` to False.

    Example:
        >>> output = format_json_output(True, "search", data=[])
        >>> orjson.loads(output)["command"]
        'search'
    """
    errors = errors or []
    warnings = warnings or []
    if errors:
        success = False

    json_data = {
        "success": success,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "data": data,
        "errors": errors,
        "warnings": warnings,
    }

    try:
        return orjson.dumps(
            json_data,
            default=_default,
            option=orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2,
        )
    except TypeError as e:
        error_data = {
            "success": False,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "command": command,
            "data": None,
            "errors": [f"JSON serialization failed: {e!s}"],
            "warnings": [],
        }
        return orjson.dumps(
            error_data,
            option=orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2,
        )


def emit_json(
    success: bool,
    command: str,
    data: Any | None = None,
    errors: list[str] | None = None,
    warnings: list[str] | None = None,
) -> None:
    """Write the envelope to stdout."""
    typer.echo(format_json_output(success, command, data, errors, warnings).decode("utf-8"))
