"""World Air Quality Index API transport."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from airscope.config.models import WAQISettings
from airscope.services.http_client import AsyncJSONClient
from airscope.shared.constants import WAQIConfig
from airscope.shared.errors import create_config_error

logger = logging.getLogger(__name__)


class WAQIClient(AsyncJSONClient):
    """Feed and search requests against api.waqi.info.

    Implements the ``AirQualityUpstream`` protocol. The token is checked
    before every request; a missing or malformed token raises ``ConfigError``
    without touching the network.

    Args:
        settings: Token, base URL and time bounds
        session: Optional shared aiohttp session
    """

    def __init__(
        self,
        settings: WAQISettings | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        super().__init__(session)
        self.settings = settings or WAQISettings()

    @property
    def is_configured(self) -> bool:
        return self.settings.has_valid_token

    def _params(self, operation: str, **extra: Any) -> dict[str, Any]:
        if not self.is_configured:
            raise create_config_error(
                "WAQI token is missing or malformed",
                missing=not self.settings.token,
                setting="api.waqi.token",
                operation=operation,
            )
        return {"token": self.settings.token.strip(), **extra}

    def _url(self, path: str) -> str:
        return self.settings.base_url.rstrip("/") + path

    async def fetch_feed(self, term: str) -> Any:
        """GET ``/feed/{term}/``."""
        params = self._params("fetch_feed")
        return await self.get_json(
            self._url(WAQIConfig.FEED_PATH.format(term=term)),
            params,
            timeout=self.settings.reading_timeout,
            operation="fetch_feed",
        )

    async def fetch_geo_feed(self, lat: float, lng: float) -> Any:
        """GET ``/feed/geo:{lat};{lng}/``."""
        params = self._params("fetch_geo_feed")
        return await self.get_json(
            self._url(WAQIConfig.GEO_FEED_PATH.format(lat=lat, lng=lng)),
            params,
            timeout=self.settings.reading_timeout,
            operation="fetch_geo_feed",
        )

    async def search(self, keyword: str) -> Any:
        """GET ``/search/?keyword=``."""
        params = self._params("search", keyword=keyword)
        return await self.get_json(
            self._url(WAQIConfig.SEARCH_PATH),
            params,
            timeout=self.settings.search_timeout,
            operation="search",
        )
