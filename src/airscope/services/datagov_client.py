"""Government monitoring-station records from data.gov.in.

The resource publishes one record per (station, pollutant). Records are
grouped into station summaries and each station's index is computed locally
from the average concentrations.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

import aiohttp
from pydantic import ValidationError

from airscope.config.models import DataGovSettings
from airscope.core.aqi_calculator import AQICalculator, category_for
from airscope.services.cache_store import CacheStore
from airscope.services.decoding import Err, decode_records
from airscope.services.http_client import AsyncJSONClient
from airscope.shared.constants import CacheConfig, DataGovConfig
from airscope.shared.errors import AirScopeError, DomainError, create_config_error
from airscope.shared.logging import log_operation_error
from airscope.shared.models import PollutantStats, StationSummary
from airscope.shared.models.api import DataGovRecord

logger = logging.getLogger(__name__)

_LAST_UPDATE_FORMAT = "%d-%m-%Y %H:%M:%S"
_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE_RUN = re.compile(r"\s+")


def _parse_float(value: str | None) -> float:
    if value is None:
        return 0.0
    try:
        number = float(value)
    except ValueError:
        return 0.0
    # NaN compares unequal to itself
    return number if number == number else 0.0


def _parse_update(value: str) -> datetime | None:
    try:
        return datetime.strptime(value, _LAST_UPDATE_FORMAT)
    except ValueError:
        return None


def _is_newer(candidate: str, current: str) -> bool:
    new, old = _parse_update(candidate), _parse_update(current)
    return new is not None and (old is None or new > old)


def group_records(
    records: list[DataGovRecord],
    calculator: AQICalculator | None = None,
) -> list[StationSummary]:
    """Group per-pollutant records into station summaries.

    Records are keyed by station, city and state. Pollutant ids are
    lower-cased; unparsable numbers become 0.0. The most recent
    ``last_update`` among a station's records is kept.

    Args:
        records: Records in publication order
        calculator: Index calculator; the CPCB tables by default

    Returns:
        One summary per station, in first-seen order
    """
    calculator = calculator or AQICalculator()
    grouped: dict[str, dict] = {}

    for record in records:
        station_key = f"{record.station}_{record.city}_{record.state}"
        station = grouped.setdefault(
            station_key,
            {
                "station": record.station,
                "city": record.city,
                "state": record.state,
                "agency": record.agency,
                "last_update": record.last_update,
                "pollutants": {},
            },
        )
        station["pollutants"][record.pollutant_id.lower()] = PollutantStats(
            min=_parse_float(record.pollutant_min),
            max=_parse_float(record.pollutant_max),
            avg=_parse_float(record.pollutant_avg),
            unit=record.pollutant_unit,
        )
        if _is_newer(record.last_update, station["last_update"]):
            station["last_update"] = record.last_update

    summaries: list[StationSummary] = []
    for station in grouped.values():
        averages = {key: stats.avg for key, stats in station["pollutants"].items()}
        try:
            overall = calculator.overall_index(averages)
        except DomainError:
            logger.debug("No supported pollutants at %s", station["station"])
            summaries.append(StationSummary(**station))
            continue
        summaries.append(
            StationSummary(
                **station,
                index=overall.index,
                category=category_for(overall.index),
                dominant_pollutant=overall.dominant_pollutant,
            )
        )
    return summaries


def filter_by_city(
    stations: list[StationSummary],
    city: str,
    limit: int,
) -> list[StationSummary]:
    """Stations whose city or station name contains ``city``.

    At most ``limit`` stations are returned. When nothing matches, the first
    ``limit`` stations are returned so the caller can still see what is
    available.
    """
    term = city.lower()
    matches = [
        station
        for station in stations
        if term in station.city.lower() or term in station.station.lower()
    ]
    return (matches or stations)[:limit]


class DataGovClient(AsyncJSONClient):
    """Station summaries from the data.gov.in real-time AQI resource.

    Failures never propagate: a fresh cache hit is served before any
    request, and a failed request yields an empty list.

    Args:
        settings: API key, resource URL, time bound and cache lifetime
        cache: Cache for city-specific results
        calculator: Index calculator used for each station
        session: Optional shared aiohttp session
    """

    def __init__(
        self,
        settings: DataGovSettings | None = None,
        cache: CacheStore | None = None,
        calculator: AQICalculator | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        super().__init__(session)
        self.settings = settings or DataGovSettings()
        self.cache = cache or CacheStore()
        self.calculator = calculator or AQICalculator()

    @staticmethod
    def cache_key(city: str) -> str:
        return _WHITESPACE_RUN.sub("_", city.lower())

    def _params(self, limit: int, operation: str) -> dict[str, str]:
        if not self.settings.api_key:
            raise create_config_error(
                "data.gov.in API key is not configured",
                missing=True,
                setting="api.datagov.api_key",
                operation=operation,
            )
        return {
            "api-key": self.settings.api_key,
            "format": DataGovConfig.FORMAT,
            "limit": str(limit),
        }

    def _cached(self, city: str | None) -> list[StationSummary] | None:
        if not city:
            return None
        cached = self.cache.get(CacheConfig.NAMESPACE_STATIONS, self.cache_key(city))
        if cached is None:
            return None
        if not isinstance(cached, list):
            logger.warning("Ignoring cached stations with unexpected shape for %s", city)
            return None
        try:
            return [StationSummary.model_validate(item) for item in cached]
        except ValidationError:
            logger.warning("Ignoring cached stations with unexpected shape for %s", city)
            return None

    async def fetch_stations(
        self,
        city: str | None = None,
        limit: int = DataGovConfig.DEFAULT_LIMIT,
    ) -> list[StationSummary]:
        """Station summaries, optionally for one city.

        Args:
            city: City name; results for a city are cached
            limit: Number of records requested from the resource

        Returns:
            Station summaries, possibly empty
        """
        cached = self._cached(city)
        if cached is not None:
            logger.debug("Using cached stations for %s", city)
            return cached

        try:
            params = self._params(limit, "fetch_stations")
            if city:
                params["filters[city]"] = _NON_WORD.sub("", city.strip())
            payload = await self.get_json(
                self.settings.resource_url,
                params,
                timeout=self.settings.timeout,
                operation="fetch_stations",
            )
        except AirScopeError as e:
            log_operation_error(
                logger, e, additional_context={"city": city or "all"}, level=logging.WARNING
            )
            return []

        decoded = decode_records(payload)
        if isinstance(decoded, Err):
            logger.warning("No usable records for %s: %s", city or "all cities", decoded.detail)
            return []

        stations = group_records(decoded.value, self.calculator)
        if city:
            stations = filter_by_city(stations, city, limit)
            if stations:
                self.cache.set(
                    CacheConfig.NAMESPACE_STATIONS,
                    self.cache_key(city),
                    [station.model_dump(mode="json") for station in stations],
                    ttl=self.settings.cache_ttl,
                )
        logger.info("Fetched %d stations", len(stations))
        return stations

    async def available_cities(self) -> list[str]:
        """Sorted unique city names, or a fixed list when none can be fetched."""
        stations = await self.fetch_stations(limit=DataGovConfig.CITIES_LIMIT)
        cities = sorted({station.city for station in stations if station.city})
        return cities or list(DataGovConfig.FALLBACK_CITIES)

    async def search_stations(self, query: str) -> list[StationSummary]:
        """Stations whose city, state or name contains the query."""
        term = query.strip().lower()
        if not term:
            return []
        stations = await self.fetch_stations(limit=DataGovConfig.SEARCH_LIMIT)
        return [
            station
            for station in stations
            if term in station.city.lower()
            or term in station.state.lower()
            or term in station.station.lower()
        ]

    async def health_check(self) -> bool:
        """True when a one-record request succeeds within the health bound."""
        try:
            await self.get_json(
                self.settings.resource_url,
                self._params(1, "health_check"),
                timeout=DataGovConfig.HEALTH_TIMEOUT,
                operation="health_check",
            )
        except AirScopeError as e:
            logger.info("data.gov.in health check failed: %s", e)
            return False
        return True
