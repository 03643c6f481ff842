"""AirScope Settings Configuration Model.

Main Settings class that consolidates all configuration domains.
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from airscope.config.models.api_settings import APISettings
from airscope.config.models.app_settings import (
    AppSettings,
    ForecastSettings,
    GeolocationSettings,
    LoggingSettings,
)
from airscope.config.models.cache_settings import CacheSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Unified configuration.

    Environment variables use the ``AIRSCOPE_`` prefix with ``__`` between
    nesting levels, e.g. ``AIRSCOPE_API__WAQI__TOKEN`` or
    ``AIRSCOPE_CACHE__TTL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="AIRSCOPE_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: APISettings = Field(default_factory=APISettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    geolocation: GeolocationSettings = Field(default_factory=GeolocationSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file with environment variable overrides."""
        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        logger.debug("Loaded configuration from %s", file_path)
        return cls(**raw_config)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to TOML file.

        Credentials are written (the file is what supplies them); only logs
        and reprs mask them.
        """
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(mode="json", exclude_none=True)
        with open(file_path, "w", encoding="utf-8") as f:
            toml.dump(config_dict, f)
