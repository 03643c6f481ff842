"""Shared aiohttp plumbing for the upstream clients.

Every request is a single GET bounded by ``asyncio.wait_for``; there are no
implicit retries. Failures surface as typed errors from
``airscope.shared.errors`` so callers can treat them uniformly.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import aiohttp
import orjson

from airscope.shared.constants import Application, HTTPStatusCodes
from airscope.shared.errors import (
    ErrorCode,
    ErrorContext,
    TransportError,
    UpstreamStatusError,
    create_timeout_error,
)
from airscope.shared.logging import log_api_call

logger = logging.getLogger(__name__)


class AsyncJSONClient:
    """Base class owning an ``aiohttp.ClientSession``.

    Args:
        session: Session to reuse. A session created by the client is closed
            by ``close()``; an injected one is left to its owner.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None) -> None:
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={"User-Agent": Application.USER_AGENT, "Accept": "application/json"},
            )
            self._owns_session = True
        return self._session

    async def _fetch(self, url: str, params: dict[str, Any]) -> tuple[int, bytes]:
        session = await self._get_session()
        async with session.get(url, params=params) as response:
            return response.status, await response.read()

    async def get_json(
        self,
        url: str,
        params: dict[str, Any],
        *,
        timeout: float,
        operation: str,
    ) -> Any:
        """GET a URL and decode its JSON body.

        Args:
            url: Absolute endpoint URL
            params: Query parameters (credentials included)
            timeout: Bound in seconds for the whole request
            operation: Operation name for error context and logs

        Returns:
            The decoded JSON value

        Raises:
            RequestTimeoutError: If the bound elapsed; the request is cancelled
            TransportError: On connection failures and non-2xx statuses
            UpstreamStatusError: If the body is not valid JSON
        """
        started = time.perf_counter()
        try:
            status, body = await asyncio.wait_for(self._fetch(url, params), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise create_timeout_error(url, timeout, operation, e) from e
        except aiohttp.ClientError as e:
            raise TransportError(
                ErrorCode.NETWORK_ERROR,
                f"Request to {url} failed: {e}",
                ErrorContext(operation=operation, additional_data={"endpoint": url}),
                e,
            ) from e

        duration_ms = (time.perf_counter() - started) * 1000
        log_api_call(logger, url, "GET", status, duration_ms, {"operation": operation})

        if status >= HTTPStatusCodes.ERROR_THRESHOLD:
            raise TransportError(
                ErrorCode.API_SERVER_ERROR,
                f"Upstream answered HTTP {status}",
                ErrorContext(
                    operation=operation,
                    additional_data={"endpoint": url, "status_code": status},
                ),
            )

        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise UpstreamStatusError(
                ErrorCode.API_INVALID_RESPONSE,
                "Upstream body is not valid JSON",
                ErrorContext(operation=operation, additional_data={"endpoint": url}),
                e,
            ) from e

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("%s session closed", type(self).__name__)

    async def __aenter__(self) -> AsyncJSONClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
