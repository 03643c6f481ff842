"""Tests for the error hierarchy and error factories."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import pytest

from airscope.shared.errors import (
    UPSTREAM_FAILURES,
    AirScopeError,
    ApplicationError,
    ConfigError,
    DomainError,
    EmptyResultError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    RequestTimeoutError,
    TransportError,
    UpstreamStatusError,
    create_config_error,
    create_timeout_error,
    create_validation_error,
)


class _Color(Enum):
    RED = "red"


class TestErrorContext:
    def test_primitives_are_coerced(self):
        context = ErrorContext(
            additional_data={"path": Path("/tmp/x"), "color": _Color.RED, "skip": None, "n": 3}
        )

        assert context.additional_data == {"path": "/tmp/x", "color": "red", "n": 3}

    def test_non_primitive_is_rejected(self):
        with pytest.raises(TypeError):
            ErrorContext(additional_data={"items": [1, 2]})

    def test_non_dict_is_rejected(self):
        with pytest.raises(TypeError):
            ErrorContext(additional_data=["token"])  # type: ignore[arg-type]

    def test_safe_dict_masks_credentials(self):
        context = ErrorContext(
            operation="fetch_feed",
            additional_data={"token": "secret-token", "api_key": "k", "term": "Delhi"},
        )

        data = context.safe_dict()

        assert data == {
            "operation": "fetch_feed",
            "additional_data": {"token": "****", "api_key": "****", "term": "Delhi"},
        }
        assert context.additional_data["token"] == "secret-token"

    def test_safe_dict_custom_mask(self):
        context = ErrorContext(additional_data={"keyword": "bandra"})
        assert context.safe_dict(mask_keys=("keyword",))["additional_data"] == {"keyword": "****"}

    def test_safe_dict_always_has_additional_data(self):
        assert ErrorContext().safe_dict() == {"additional_data": {}}


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error_type", "base"),
        [
            (ConfigError, ApplicationError),
            (RequestTimeoutError, InfrastructureError),
            (TransportError, InfrastructureError),
            (UpstreamStatusError, InfrastructureError),
            (EmptyResultError, DomainError),
        ],
    )
    def test_subclasses(self, error_type, base):
        assert issubclass(error_type, base)
        assert issubclass(error_type, AirScopeError)

    def test_upstream_failures_exclude_config_errors(self):
        assert ConfigError not in UPSTREAM_FAILURES
        assert set(UPSTREAM_FAILURES) == {RequestTimeoutError, TransportError, UpstreamStatusError}

    def test_str_and_to_dict(self):
        cause = ValueError("bad")
        error = TransportError(
            ErrorCode.NETWORK_ERROR,
            "offline",
            ErrorContext(operation="fetch_feed", additional_data={"token": "t"}),
            cause,
        )

        assert str(error) == "NETWORK_ERROR: offline"
        assert error.to_dict() == {
            "code": "NETWORK_ERROR",
            "message": "offline",
            "context": {"operation": "fetch_feed", "additional_data": {"token": "****"}},
            "original_error": "bad",
        }


class TestFactories:
    def test_config_error_missing(self):
        error = create_config_error("no token", missing=True, setting="api.waqi.token")

        assert isinstance(error, ConfigError)
        assert error.code == ErrorCode.CONFIG_MISSING
        assert error.context.additional_data == {"setting": "api.waqi.token"}

    def test_config_error_invalid(self):
        assert create_config_error("short token").code == ErrorCode.CONFIG_INVALID

    def test_timeout_error(self):
        cause = TimeoutError()

        error = create_timeout_error("https://api.waqi.info/search/", 3.0, "search", cause)

        assert error.code == ErrorCode.API_TIMEOUT
        assert error.message == "Request timeout after 3s"
        assert error.original_error is cause
        assert error.context.additional_data["endpoint"] == "https://api.waqi.info/search/"

    def test_validation_error(self):
        error = create_validation_error("bad", field="pollutant", code=ErrorCode.UNKNOWN_POLLUTANT)

        assert isinstance(error, DomainError)
        assert error.code == ErrorCode.UNKNOWN_POLLUTANT
