"""Bounded acquisition of the user's position with a default fallback."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from airscope.shared.constants import LocationDefaults

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """A latitude/longitude fix.

    Attributes:
        lat: Latitude in degrees
        lng: Longitude in degrees
        timestamp: Time of the fix in epoch seconds
        is_default: True when the fix is the configured default location
    """

    lat: float
    lng: float
    timestamp: float
    is_default: bool = False

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.lat, self.lng)


PositionProvider = Callable[[], Awaitable[Position]]


async def resolve_position(
    provider: PositionProvider | None,
    timeout: float = LocationDefaults.GEOLOCATION_TIMEOUT,
    maximum_age: float = LocationDefaults.GEOLOCATION_MAX_AGE,
    default: tuple[float, float] = LocationDefaults.DEFAULT_COORDINATES,
    clock: Callable[[], float] = time.time,
) -> Position:
    """Ask a position provider for a fix, falling back to a default.

    The default location is returned when there is no provider, when the
    provider is denied (``PermissionError``), fails with ``OSError``, takes
    longer than ``timeout`` seconds, or returns a fix older than
    ``maximum_age`` seconds.

    Args:
        provider: Zero-argument coroutine function returning a Position
        timeout: Bound on the provider in seconds
        maximum_age: Oldest acceptable fix in seconds
        default: Coordinates of the fallback location
        clock: Current time in epoch seconds

    Returns:
        The provider's fix, or the default with ``is_default`` set
    """
    fallback = Position(default[0], default[1], clock(), is_default=True)
    if provider is None:
        return fallback

    try:
        position = await asyncio.wait_for(provider(), timeout=timeout)
    except PermissionError:
        logger.info("Location permission denied, using default location")
        return fallback
    except asyncio.TimeoutError:
        logger.warning("No position within %ss, using default location", timeout)
        return fallback
    except OSError as e:
        logger.warning("Position provider failed (%s), using default location", e)
        return fallback

    if clock() - position.timestamp > maximum_age:
        logger.info("Position fix is older than %ss, using default location", maximum_age)
        return fallback
    return position
