"""API configuration models (WAQI, data.gov.in).

Credentials are masked in ``__repr__`` so settings objects can be logged.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from airscope.shared.constants import DataGovConfig, WAQIConfig


def _mask(secret: str) -> str:
    return "****" if secret else "[empty]"


class WAQISettings(BaseModel):
    """World Air Quality Index API configuration."""

    token: str = Field(
        default="",
        repr=False,
        description="WAQI API token; readings degrade to fallback data without it",
    )
    base_url: str = Field(default=WAQIConfig.BASE_URL, description="API base URL")
    reading_timeout: float = Field(
        default=WAQIConfig.READING_TIMEOUT,
        gt=0,
        description="Time bound for feed requests in seconds",
    )
    search_timeout: float = Field(
        default=WAQIConfig.SEARCH_TIMEOUT,
        gt=0,
        description="Time bound for search requests in seconds",
    )

    @property
    def has_valid_token(self) -> bool:
        """True when a token is present and long enough to be real."""
        return len(self.token.strip()) >= WAQIConfig.MIN_TOKEN_LENGTH

    def __repr__(self) -> str:
        return (
            f"WAQISettings(token={_mask(self.token)}, base_url={self.base_url!r}, "
            f"reading_timeout={self.reading_timeout}, search_timeout={self.search_timeout})"
        )


class DataGovSettings(BaseModel):
    """data.gov.in records API configuration."""

    api_key: str = Field(default="", repr=False, description="data.gov.in API key")
    resource_url: str = Field(default=DataGovConfig.RESOURCE_URL)
    timeout: float = Field(default=DataGovConfig.TIMEOUT, gt=0)
    cache_ttl: int = Field(
        default=300,
        gt=0,
        description="Station list cache lifetime in seconds",
    )

    def __repr__(self) -> str:
        return (
            f"DataGovSettings(api_key={_mask(self.api_key)}, "
            f"resource_url={self.resource_url!r}, timeout={self.timeout})"
        )


class APISettings(BaseModel):
    """Container for all upstream API configurations."""

    waqi: WAQISettings = Field(default_factory=WAQISettings)
    datagov: DataGovSettings = Field(default_factory=DataGovSettings)


__all__ = ["APISettings", "DataGovSettings", "WAQISettings"]
