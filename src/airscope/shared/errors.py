"""AirScope Error Handling Module

This module defines the error handling system for AirScope, providing
structured error classes with context information.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved

Network-originating errors (timeouts, transport failures, error payloads)
are raised by the upstream clients and converted into fallback transitions
by the gateway; they are not meant to reach callers of the gateway.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]

# Default keys to mask in safe_dict
SAFE_DICT_MASK_KEYS: tuple[str, ...] = ("token", "api_key")


class ErrorCode(str, Enum):
    """Error codes for the AirScope application."""

    # Network and API Errors
    NETWORK_ERROR = "NETWORK_ERROR"
    API_TIMEOUT = "API_TIMEOUT"
    API_SERVER_ERROR = "API_SERVER_ERROR"
    API_STATUS_ERROR = "API_STATUS_ERROR"
    API_INVALID_RESPONSE = "API_INVALID_RESPONSE"
    EMPTY_RESULT = "EMPTY_RESULT"

    # Cache Errors
    CACHE_READ_FAILED = "CACHE_READ_FAILED"
    CACHE_WRITE_FAILED = "CACHE_WRITE_FAILED"
    CACHE_CORRUPTED = "CACHE_CORRUPTED"
    CACHE_SERIALIZATION_ERROR = "CACHE_SERIALIZATION_ERROR"

    # Configuration Errors
    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_POLLUTANT = "UNKNOWN_POLLUTANT"

    # Application Errors
    APPLICATION_ERROR = "APPLICATION_ERROR"
    CLI_COMMAND_FAILED = "CLI_COMMAND_FAILED"
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path, Enum, Decimal to primitive types. None values are dropped.

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if val is None:
            continue
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types are allowed in additional_data so the context can
    be logged as JSON without leaking arbitrary objects.

    Attributes:
        operation: Operation name that caused the error
        file_path: File path associated with the error
        additional_data: Dict with primitive values only
    """

    operation: str | None = None
    file_path: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is not None:
            object.__setattr__(
                self, "additional_data", _coerce_primitives(self.additional_data)
            )

    def safe_dict(self, *, mask_keys: tuple[str, ...] | None = None) -> dict[str, Any]:
        """Export context as dict with credential masking.

        Args:
            mask_keys: additional_data keys to replace with "****".
                Defaults to SAFE_DICT_MASK_KEYS.

        Returns:
            Dictionary that always contains an ``additional_data`` key.
        """
        if mask_keys is None:
            mask_keys = SAFE_DICT_MASK_KEYS

        data: dict[str, Any] = {}
        if self.operation is not None:
            data["operation"] = self.operation
        if self.file_path is not None:
            data["file_path"] = self.file_path

        additional = dict(self.additional_data or {})
        for key in mask_keys:
            if key in additional:
                additional[key] = "****"
        data["additional_data"] = additional
        return data


class AirScopeError(Exception):
    """Base exception class for all AirScope errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize AirScopeError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error
        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging with credential masking."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(AirScopeError):
    """Domain rule violations (bad pollutant ids, empty inputs, no matches)."""


class InfrastructureError(AirScopeError):
    """Failures while talking to external systems: network, disk, cache."""


class ApplicationError(AirScopeError):
    """Application-level errors such as configuration and command handling."""


class ConfigError(ApplicationError):
    """Missing or malformed upstream credential.

    Never retried: the gateway skips the network and degrades immediately.
    """


class RequestTimeoutError(InfrastructureError):
    """An upstream request exceeded its time bound."""


class TransportError(InfrastructureError):
    """Connectivity failure or a non-success HTTP response."""


class UpstreamStatusError(InfrastructureError):
    """Well-formed response whose payload reports failure, or a malformed payload."""


class EmptyResultError(DomainError):
    """Search or records call returned zero usable items."""


# Errors that move the gateway into its fallback chain
UPSTREAM_FAILURES: tuple[type[AirScopeError], ...] = (
    RequestTimeoutError,
    TransportError,
    UpstreamStatusError,
)


def create_config_error(
    message: str,
    *,
    missing: bool = False,
    setting: str | None = None,
    operation: str | None = None,
) -> ConfigError:
    """Create a configuration error with context."""
    return ConfigError(
        ErrorCode.CONFIG_MISSING if missing else ErrorCode.CONFIG_INVALID,
        message,
        ErrorContext(operation=operation, additional_data={"setting": setting}),
    )


def create_timeout_error(
    endpoint: str,
    timeout: float,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> RequestTimeoutError:
    """Create a request timeout error with context."""
    return RequestTimeoutError(
        ErrorCode.API_TIMEOUT,
        f"Request timeout after {timeout:g}s",
        ErrorContext(
            operation=operation,
            additional_data={"endpoint": endpoint, "timeout": timeout},
        ),
        original_error,
    )


def create_validation_error(
    message: str,
    field: str | None = None,
    operation: str | None = None,
    code: ErrorCode = ErrorCode.VALIDATION_ERROR,
) -> DomainError:
    """Create a validation error with context."""
    return DomainError(
        code,
        message,
        ErrorContext(operation=operation, additional_data={"field": field}),
    )
