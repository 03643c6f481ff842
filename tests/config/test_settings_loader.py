"""Tests for settings loading and credential handling."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import VALID_TOKEN

from airscope.config import Settings, SettingsLoader, get_config, load_settings
from airscope.config.models import DataGovSettings, WAQISettings
from airscope.shared.errors import ApplicationError, ErrorCode


@pytest.fixture
def isolated_cwd(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with an empty home so no real config is read."""
    monkeypatch.chdir(temp_dir)
    monkeypatch.setenv("HOME", str(temp_dir / "home"))
    return temp_dir


class TestLoadSettings:
    def test_defaults_without_any_source(self, isolated_cwd):
        # When
        settings = load_settings()

        # Then
        assert settings.api.waqi.token == ""
        assert settings.api.waqi.has_valid_token is False
        assert settings.api.waqi.reading_timeout == 8
        assert settings.api.waqi.search_timeout == 3
        assert settings.cache.ttl == 900
        assert settings.cache.backend == "memory"
        assert settings.geolocation.default_coordinates == (28.6139, 77.2090)

    def test_provider_variable_fills_token(self, isolated_cwd, monkeypatch):
        monkeypatch.setenv("WAQI_API_TOKEN", f" {VALID_TOKEN} ")
        monkeypatch.setenv("DATAGOV_API_KEY", "datagov-key")

        settings = load_settings()

        assert settings.api.waqi.token == VALID_TOKEN
        assert settings.api.waqi.has_valid_token is True
        assert settings.api.datagov.api_key == "datagov-key"

    def test_prefixed_variable_wins(self, isolated_cwd, monkeypatch):
        monkeypatch.setenv("WAQI_API_TOKEN", "provider-token-000")
        monkeypatch.setenv("AIRSCOPE_API__WAQI__TOKEN", VALID_TOKEN)

        assert load_settings().api.waqi.token == VALID_TOKEN

    def test_nested_environment_override(self, isolated_cwd, monkeypatch):
        monkeypatch.setenv("AIRSCOPE_CACHE__TTL", "60")
        assert load_settings().cache.ttl == 60

    def test_env_file_is_loaded(self, isolated_cwd, monkeypatch):
        # Given: record the variable so it is restored after the test
        monkeypatch.setenv("WAQI_API_TOKEN", "placeholder")
        monkeypatch.delenv("WAQI_API_TOKEN")
        (isolated_cwd / ".env").write_text(f"WAQI_API_TOKEN={VALID_TOKEN}\n", encoding="utf-8")

        # When
        settings = load_settings()

        # Then
        assert settings.api.waqi.token == VALID_TOKEN

    def test_toml_file_in_working_directory(self, isolated_cwd):
        (isolated_cwd / "config.toml").write_text(
            "[cache]\nttl = 120\nbackend = \"file\"\n\n[forecast]\ndefault_horizon = 48\n",
            encoding="utf-8",
        )

        settings = load_settings()

        assert settings.cache.ttl == 120
        assert settings.cache.backend == "file"
        assert settings.forecast.default_horizon == 48

    def test_explicit_path(self, isolated_cwd):
        path = isolated_cwd / "custom.toml"
        path.write_text("[api.waqi]\nreading_timeout = 5.5\n", encoding="utf-8")

        assert load_settings(path).api.waqi.reading_timeout == 5.5

    def test_invalid_value_is_configuration_error(self, isolated_cwd):
        (isolated_cwd / "config.toml").write_text("[cache]\nttl = -1\n", encoding="utf-8")

        with pytest.raises(ApplicationError) as exc_info:
            load_settings()

        assert exc_info.value.code == ErrorCode.CONFIGURATION_ERROR

    def test_missing_explicit_path_is_configuration_error(self, isolated_cwd):
        with pytest.raises(ApplicationError) as exc_info:
            load_settings(isolated_cwd / "absent.toml")

        assert exc_info.value.code == ErrorCode.CONFIGURATION_ERROR

    def test_round_trip_through_toml(self, isolated_cwd):
        # Given
        original = Settings(api={"waqi": {"token": VALID_TOKEN}}, cache={"ttl": 42})
        path = isolated_cwd / "saved" / "config.toml"

        # When
        original.to_toml_file(path)
        loaded = Settings.from_toml_file(path)

        # Then
        assert loaded.api.waqi.token == VALID_TOKEN
        assert loaded.cache.ttl == 42


class TestSettingsLoader:
    def test_get_config_is_cached(self, isolated_cwd):
        assert get_config() is get_config()

    def test_reset_forces_reload(self, isolated_cwd):
        first = get_config()

        SettingsLoader().reset()

        assert get_config() is not first


class TestCredentialMasking:
    def test_waqi_repr_masks_token(self):
        settings = WAQISettings(token=VALID_TOKEN)

        assert VALID_TOKEN not in repr(settings)
        assert "token=****" in repr(settings)

    def test_empty_token_repr(self):
        assert "token=[empty]" in repr(WAQISettings())

    def test_datagov_repr_masks_key(self):
        settings = DataGovSettings(api_key="secret-key-value")
        assert "secret-key-value" not in repr(settings)

    @pytest.mark.parametrize(
        ("token", "valid"),
        [("", False), ("123456789", False), ("1234567890", True), ("  123456789  ", False)],
    )
    def test_token_length_rule(self, token, valid):
        assert WAQISettings(token=token).has_valid_token is valid
