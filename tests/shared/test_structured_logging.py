"""Tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

from rich.logging import RichHandler

from airscope.shared.errors import ErrorCode, ErrorContext, TransportError
from airscope.shared.logging import (
    StructuredFormatter,
    log_api_call,
    log_operation_error,
    log_operation_success,
    setup_structured_logger,
)


class TestSetupStructuredLogger:
    def test_rich_console_handler(self):
        logger = setup_structured_logger("airscope", "DEBUG")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_structured_logger("airscope", "INFO")
        logger = setup_structured_logger("airscope", "WARNING", use_rich_console=False)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_file_handler_writes_json_lines(self, temp_dir):
        # Given
        log_file = temp_dir / "airscope.log"
        logger = setup_structured_logger("airscope", "INFO", str(log_file))

        # When
        logger.info("hello", extra={"operation": "test"})
        for handler in logger.handlers:
            handler.flush()
            handler.close()

        # Then
        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert entry["message"] == "hello"
        assert entry["level"] == "INFO"
        assert entry["operation"] == "test"


class TestLogOperationError:
    def test_logs_code_and_masked_context(self):
        # Given
        logger = MagicMock(spec=logging.Logger)
        error = TransportError(
            ErrorCode.NETWORK_ERROR,
            "offline",
            ErrorContext(operation="fetch_feed", additional_data={"token": "secret"}),
        )

        # When
        log_operation_error(logger, error, additional_context={"key": "delhi"})

        # Then
        level, message = logger.log.call_args.args
        extra = logger.log.call_args.kwargs["extra"]
        assert level == logging.ERROR
        assert message == "offline"
        assert extra["error_code"] == "NETWORK_ERROR"
        assert extra["operation"] == "fetch_feed"
        assert extra["context"]["additional_data"] == {"token": "****"}
        assert extra["context"]["key"] == "delhi"

    def test_warning_level_without_traceback(self):
        logger = MagicMock(spec=logging.Logger)
        error = TransportError(ErrorCode.NETWORK_ERROR, "offline", original_error=OSError())

        log_operation_error(logger, error, level=logging.WARNING)

        assert logger.log.call_args.args[0] == logging.WARNING
        assert logger.log.call_args.kwargs["exc_info"] is False


class TestLogOperationSuccess:
    def test_debug_with_duration_and_result(self):
        logger = MagicMock(spec=logging.Logger)

        log_operation_success(
            logger, "fetch_reading", 12.5, result_info={"index": 87}, context={"key": "mumbai"}
        )

        extra = logger.debug.call_args.kwargs["extra"]
        assert extra["operation"] == "fetch_reading"
        assert extra["duration_ms"] == 12.5
        assert extra["result_info"] == {"index": 87}
        assert extra["context"]["key"] == "mumbai"


class TestLogApiCall:
    def test_success_is_debug(self):
        logger = MagicMock(spec=logging.Logger)

        log_api_call(
            logger, "https://api.waqi.info/feed/delhi/", status_code=200, duration_ms=12.34
        )

        level, message = logger.log.call_args.args
        assert level == logging.DEBUG
        assert "succeeded with status 200" in message
        assert logger.log.call_args.kwargs["extra"]["context"]["duration_ms"] == 12.3

    def test_error_status_is_warning(self):
        logger = MagicMock(spec=logging.Logger)

        log_api_call(logger, "https://api.waqi.info/feed/delhi/", status_code=429)

        level, message = logger.log.call_args.args
        assert level == logging.WARNING
        assert "failed with status 429" in message
