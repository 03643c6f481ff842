"""
Pytest configuration and shared fixtures for AirScope tests.

Fakes are injected through the same seams production code uses: the
key-value store and upstream protocols, a seeded random source and a
controllable clock.
"""

from __future__ import annotations

import logging
import random
import tempfile
from collections.abc import Generator
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from airscope.config.loader import SettingsLoader
from airscope.services.aqi_gateway import AQIGateway
from airscope.services.cache_store import CacheStore, InMemoryKeyValueStore
from airscope.services.synthetic import SyntheticReadingFactory

# 2026-01-15 08:00 UTC, a Thursday in winter
FIXED_EPOCH = 1768464000.0
VALID_TOKEN = "demo-token-0123456789"  # pragma: allowlist secret


class FakeClock:
    """Manually advanced clock usable as both a seconds and a datetime source."""

    def __init__(self, start: float = FIXED_EPOCH) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def datetime(self) -> datetime:
        return datetime.fromtimestamp(self.now, tz=timezone.utc)


class FakeUpstream:
    """In-memory stand-in for the WAQI client."""

    def __init__(self, configured: bool = True) -> None:
        self.configured = configured
        self.fetch_feed = AsyncMock()
        self.fetch_geo_feed = AsyncMock()
        self.search = AsyncMock()
        self.close = AsyncMock()

    @property
    def is_configured(self) -> bool:
        return self.configured


def make_feed_payload(
    name: str = "Mumbai",
    aqi: Any = 87,
    geo: list[float] | None = None,
    dominentpol: str | None = "pm25",
    iaqi: dict[str, Any] | None = None,
    epoch: int | None = 1768460400,
) -> dict[str, Any]:
    """A /feed/ response body shaped like the provider's."""
    data: dict[str, Any] = {
        "aqi": aqi,
        "city": {
            "name": name,
            "geo": [19.076, 72.8777] if geo is None else geo,
            "url": "https://aqicn.org/city/mumbai/",
        },
        "iaqi": iaqi if iaqi is not None else {"pm25": {"v": 87}, "pm10": {"v": 54}},
    }
    if dominentpol is not None:
        data["dominentpol"] = dominentpol
    if epoch is not None:
        data["time"] = {"s": "2026-01-15 12:30:00", "tz": "+05:30", "v": epoch}
    return {"status": "ok", "data": data}


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def cache(kv_store: InMemoryKeyValueStore, clock: FakeClock) -> CacheStore:
    return CacheStore(kv_store, default_ttl=900, clock=clock)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def gateway(upstream: FakeUpstream, cache: CacheStore, clock: FakeClock) -> AQIGateway:
    """Gateway over fakes with a seeded random source."""
    synthetic = SyntheticReadingFactory(rng=random.Random(42), clock=clock.datetime)
    return AQIGateway(upstream, cache=cache, synthetic=synthetic, clock=clock.datetime)


@pytest.fixture(autouse=True)
def _isolate_global_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep settings and logger configuration from leaking between tests."""
    monkeypatch.delenv("WAQI_API_TOKEN", raising=False)
    monkeypatch.delenv("DATAGOV_API_KEY", raising=False)
    SettingsLoader().reset()
    yield
    SettingsLoader().reset()
    package_logger = logging.getLogger("airscope")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
