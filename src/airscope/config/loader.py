"""Settings loader and singleton manager.

This module handles:
- Environment variable loading from .env files
- Configuration file loading from TOML
- Thread-safe singleton access to the Settings instance

A missing upstream credential is not a load-time error. The gateway checks
the credential per request and degrades to fallback data without it.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from airscope.config.models.settings import Settings
from airscope.shared.constants import DataGovConfig, FileSystem, WAQIConfig
from airscope.shared.errors import ApplicationError, ErrorCode, ErrorContext

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Thread-safe singleton manager for Settings.

    Uses double-checked locking so the common path takes no lock.
    """

    _instance: Settings | None = None
    _lock: threading.RLock = threading.RLock()

    def get_config(self) -> Settings:
        """Return the process-wide settings, loading them on first use."""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    type(self)._instance = load_settings()
        return self._instance

    def reload_config(self, config_path: str | Path | None = None) -> Settings:
        """Discard the cached settings and load them again."""
        with self._lock:
            type(self)._instance = load_settings(config_path)
        return self._instance

    def reset(self) -> None:
        """Forget the cached settings (used by tests)."""
        with self._lock:
            type(self)._instance = None


def _load_env_file(env_file: Path | None = None) -> None:
    """Load variables from a .env file if one exists.

    Values already present in the process environment win over the file.
    """
    env_file = env_file or Path(FileSystem.ENV_FILE)
    if not env_file.exists():
        logger.debug("No %s file found, using process environment only", env_file)
        return
    load_dotenv(env_file, override=False)
    logger.debug("Loaded environment from %s", env_file)


def _apply_credential_fallbacks(settings: Settings) -> Settings:
    """Fill empty credentials from the plain provider variables.

    ``WAQI_API_TOKEN`` and ``DATAGOV_API_KEY`` are the names the providers
    document; the prefixed nested variables take precedence when set.
    """
    waqi = settings.api.waqi
    datagov = settings.api.datagov

    token = os.getenv(WAQIConfig.TOKEN_ENV_VAR, "").strip()
    if not waqi.token and token:
        waqi = waqi.model_copy(update={"token": token})

    api_key = os.getenv(DataGovConfig.KEY_ENV_VAR, "").strip()
    if not datagov.api_key and api_key:
        datagov = datagov.model_copy(update={"api_key": api_key})

    api = settings.api.model_copy(update={"waqi": waqi, "datagov": datagov})
    return settings.model_copy(update={"api": api})


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML file, the environment, or defaults.

    Args:
        config_path: Explicit TOML file. When None, ``config/config.toml``,
            ``config.toml`` and ``~/.airscope/config.toml`` are tried in order.

    Returns:
        Settings instance

    Raises:
        ApplicationError: If a configuration file exists but is invalid
    """
    _load_env_file()

    candidates = (
        [Path(config_path)]
        if config_path
        else [
            Path(FileSystem.CONFIG_DIRECTORY) / FileSystem.CONFIG_FILE,
            Path(FileSystem.CONFIG_FILE),
            Path.home() / FileSystem.HOME_DIR / FileSystem.CONFIG_FILE,
        ]
    )

    try:
        for candidate in candidates:
            if candidate.exists() or config_path:
                return _apply_credential_fallbacks(Settings.from_toml_file(candidate))
        return _apply_credential_fallbacks(Settings())
    except (ValidationError, ValueError, FileNotFoundError) as e:
        raise ApplicationError(
            code=ErrorCode.CONFIGURATION_ERROR,
            message=f"Failed to load configuration: {e}",
            context=ErrorContext(
                operation="load_settings",
                additional_data={"config_path": str(config_path or "")},
            ),
            original_error=e,
        ) from e


_loader = SettingsLoader()


def get_config() -> Settings:
    """Return the process-wide settings."""
    return _loader.get_config()


def reload_config(config_path: str | Path | None = None) -> Settings:
    """Reload the process-wide settings."""
    return _loader.reload_config(config_path)
