"""Upstream payload decoding.

Turns raw provider JSON into domain values. Decoding never raises: every
payload maps to either ``Ok(value)`` or ``Err(kind, detail)``, and the
gateway decides what a failure means.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar, Union

from pydantic import ValidationError

from airscope.core.aqi_calculator import CPCB_BREAKPOINTS, clamp_index
from airscope.services.name_normalizer import NameNormalizer
from airscope.shared.constants import Pollutant, WAQIConfig
from airscope.shared.errors import (
    EmptyResultError,
    ErrorCode,
    ErrorContext,
    UpstreamStatusError,
)
from airscope.shared.models import AQIReading, LocationSuggestion, ReadingSource
from airscope.shared.models.api import (
    DataGovRecord,
    DataGovResponse,
    WAQIFeedData,
    WAQIFeedResponse,
    WAQISearchResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FailureKind(str, Enum):
    """Why a payload could not be decoded."""

    STATUS = "status"  # status field is not "ok"
    MISSING_DATA = "missing_data"
    MALFORMED = "malformed"
    EMPTY = "empty"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: FailureKind
    detail: str = ""

    def to_error(self, operation: str | None = None) -> UpstreamStatusError | EmptyResultError:
        """Typed error for logging or raising."""
        context = ErrorContext(operation=operation, additional_data={"kind": self.kind})
        if self.kind is FailureKind.EMPTY:
            return EmptyResultError(ErrorCode.EMPTY_RESULT, self.detail, context)
        code = (
            ErrorCode.API_STATUS_ERROR
            if self.kind is FailureKind.STATUS
            else ErrorCode.API_INVALID_RESPONSE
        )
        return UpstreamStatusError(code, self.detail, context)


Decoded = Union[Ok[T], Err]


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _concentrations(data: WAQIFeedData) -> dict[str, float]:
    values: dict[str, float] = {}
    for key, measurement in data.iaqi.items():
        number = _as_number(measurement.v)
        if number is not None:
            values[key] = number
    return values


def _dominant(data: WAQIFeedData, concentrations: dict[str, float]) -> str:
    if data.dominentpol:
        return data.dominentpol
    known = {
        key: value for key, value in concentrations.items() if key in CPCB_BREAKPOINTS
    }
    if not known:
        return Pollutant.PM25
    # max() keeps the first key on ties
    return max(known, key=known.__getitem__)


def _measured_at(data: WAQIFeedData, now: Callable[[], datetime]) -> datetime:
    if data.time is not None and data.time.v is not None:
        return datetime.fromtimestamp(data.time.v, tz=timezone.utc)
    return now()


def _coordinates(geo: list[float]) -> tuple[float, float] | None:
    if len(geo) >= 2:
        return (float(geo[0]), float(geo[1]))
    return None


def decode_feed(
    payload: Any,
    *,
    normalizer: NameNormalizer,
    fallback_coordinates: tuple[float, float],
    now: Callable[[], datetime],
    override_coordinates: tuple[float, float] | None = None,
) -> Decoded[AQIReading]:
    """Decode a ``/feed/...`` response into a live reading.

    Args:
        payload: Parsed JSON body
        normalizer: Normalizer applied to the station name
        fallback_coordinates: Used when the station reports no geo pair
        now: Clock used when the payload carries no observation time
        override_coordinates: Coordinates to keep regardless of the station
            position (coordinate lookups report what was asked for)

    Returns:
        Ok(AQIReading) tagged ``live``, or Err describing the failure
    """
    try:
        response = WAQIFeedResponse.model_validate(payload)
    except ValidationError as e:
        return Err(FailureKind.MALFORMED, f"Invalid feed envelope: {e.error_count()} errors")

    if response.status != WAQIConfig.STATUS_OK:
        detail = response.data if isinstance(response.data, str) else response.status
        return Err(FailureKind.STATUS, f"Feed status: {detail}")
    if not isinstance(response.data, WAQIFeedData):
        return Err(FailureKind.MISSING_DATA, "Feed response has no data object")

    data = response.data
    aqi = _as_number(data.aqi)
    if aqi is None:
        return Err(FailureKind.MALFORMED, f"Non-numeric aqi: {data.aqi!r}")

    concentrations = _concentrations(data)
    coordinates = (
        override_coordinates
        or _coordinates(data.city.geo)
        or fallback_coordinates
    )
    reading = AQIReading(
        index=clamp_index(aqi),
        dominant_pollutant=_dominant(data, concentrations),
        pollutant_concentrations=concentrations,
        measured_at=_measured_at(data, now),
        coordinates=coordinates,
        location_name=normalizer.normalize(data.city.name),
        source=ReadingSource.LIVE,
        station_url=data.city.url,
        timezone=data.time.tz if data.time else None,
    )
    return Ok(reading)


def decode_search(
    payload: Any,
    *,
    normalizer: NameNormalizer,
    limit: int = WAQIConfig.MAX_SEARCH_RESULTS,
) -> Decoded[list[LocationSuggestion]]:
    """Decode a ``/search/`` response into at most ``limit`` suggestions.

    Stations without a usable geo pair are skipped.
    """
    try:
        response = WAQISearchResponse.model_validate(payload)
    except ValidationError as e:
        return Err(FailureKind.MALFORMED, f"Invalid search envelope: {e.error_count()} errors")

    if response.status != WAQIConfig.STATUS_OK:
        return Err(FailureKind.STATUS, f"Search status: {response.status}")
    if not isinstance(response.data, list):
        return Err(FailureKind.MISSING_DATA, "Search response has no result list")

    suggestions: list[LocationSuggestion] = []
    for item in response.data:
        coordinates = _coordinates(item.station.geo)
        if coordinates is None:
            continue
        suggestions.append(
            LocationSuggestion(
                name=normalizer.normalize(item.station.name),
                coordinates=coordinates,
            )
        )
        if len(suggestions) >= limit:
            break

    if not suggestions:
        return Err(FailureKind.EMPTY, "Search returned no stations")
    return Ok(suggestions)


def decode_records(payload: Any) -> Decoded[list[DataGovRecord]]:
    """Decode a data.gov.in records page."""
    try:
        response = DataGovResponse.model_validate(payload)
    except ValidationError as e:
        return Err(FailureKind.MALFORMED, f"Invalid records page: {e.error_count()} errors")

    if response.status is not None and response.status != WAQIConfig.STATUS_OK:
        return Err(FailureKind.STATUS, response.message or f"Records status: {response.status}")
    if not response.records:
        return Err(FailureKind.EMPTY, "No records returned")
    return Ok(response.records)
