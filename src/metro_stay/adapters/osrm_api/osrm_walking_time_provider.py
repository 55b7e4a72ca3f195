"""OSRM walking time provider adapter.

Uses the public foot-routing OSRM instance of openstreetmap.de.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from metro_stay.adapters.api_request_logger import log_api_request
from metro_stay.domain.ports.walking_time_provider import WalkingTimeProvider

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

OSRM_FOOT_ROUTE_URL = "https://routing.openstreetmap.de/routed-foot/route/v1/foot"


def parse_route_minutes(data: Any) -> int | None:
    """Walking minutes of the first route in an OSRM response."""
    if not isinstance(data, dict) or data.get("code") != "Ok":
        return None
    routes = data.get("routes") or []
    if not routes or "duration" not in routes[0]:
        return None
    return round(float(routes[0]["duration"]) / 60)


class OsrmWalkingTimeProvider(WalkingTimeProvider):
    """Estimates walking minutes with OSRM foot routing."""

    def __init__(
        self,
        session: "ClientSession | None",
        base_url: str = OSRM_FOOT_ROUTE_URL,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with an aiohttp session."""
        self._session = session
        self._base_url = base_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def walk_minutes(
        self, from_latitude: float, from_longitude: float, to_latitude: float, to_longitude: float
    ) -> int | None:
        """Walking minutes between two positions, or None when no route is found."""
        if self._session is None:
            return None

        # OSRM expects longitude first
        url = f"{self._base_url}/{from_longitude},{from_latitude};{to_longitude},{to_latitude}"
        params = {"overview": "false"}
        log_api_request("osrm", "GET", url, params)

        try:
            async with self._session.get(url, params=params, timeout=self._timeout) as response:
                if response.status != 200:
                    logger.warning(f"OSRM API returned status {response.status}")
                    return None
                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(f"Walking route calculation failed: {e}")
            return None

        minutes = parse_route_minutes(data)
        if minutes is None:
            logger.debug("No walking route found")
        return minutes
