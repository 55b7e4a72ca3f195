"""Rakuten Travel lodging provider adapter."""

import asyncio
import logging
from datetime import date
from typing import TYPE_CHECKING

import aiohttp

from metro_stay.adapters.api_rate_limiter import ApiRateLimiter
from metro_stay.adapters.api_request_logger import log_api_request
from metro_stay.adapters.rakuten_api.constants import (
    DATUM_TYPE_WGS84,
    DEFAULT_SEARCH_RADIUS_KM,
    RAKUTEN_MIN_DELAY_SECONDS,
    RAKUTEN_VACANT_HOTEL_URL,
)
from metro_stay.adapters.rakuten_api.hotel_parser import parse_vacant_hotels
from metro_stay.domain.models.candidate import Candidate
from metro_stay.domain.ports.lodging_provider import LodgingProvider

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class RakutenLodgingProvider(LodgingProvider):
    """Searches vacant hotels around a position with Rakuten Travel.

    Results are cached for the current day, keyed by coordinates rounded to
    two decimals, stay dates, guests and rooms.
    """

    def __init__(
        self,
        session: "ClientSession | None",
        application_id: str,
        search_radius_km: float = DEFAULT_SEARCH_RADIUS_KM,
        min_delay_seconds: float = RAKUTEN_MIN_DELAY_SECONDS,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with an aiohttp session and Rakuten application id."""
        self._session = session
        self._application_id = application_id
        self._search_radius_km = search_radius_km
        self._min_delay_seconds = min_delay_seconds
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._cache: dict[str, tuple[date, list[Candidate]]] = {}

    @staticmethod
    def cache_key(
        latitude: float,
        longitude: float,
        check_in: date,
        check_out: date,
        guests: int,
        rooms: int,
    ) -> str:
        """Cache key sharing results between nearby positions."""
        return f"{check_in}_{check_out}_{latitude:.2f}_{longitude:.2f}_{guests}_{rooms}"

    def _cached(self, key: str) -> list[Candidate] | None:
        entry = self._cache.get(key)
        if entry is None:
            return None
        cached_on, candidates = entry
        if cached_on != date.today():
            del self._cache[key]
            return None
        return candidates

    async def search(
        self,
        latitude: float,
        longitude: float,
        check_in: date,
        check_out: date,
        guests: int,
        rooms: int,
    ) -> list[Candidate]:
        """Search vacant hotels, cheapest first."""
        if self._session is None:
            return []
        if not self._application_id:
            logger.warning("Rakuten application id missing, no lodging offers available")
            return []

        key = self.cache_key(latitude, longitude, check_in, check_out, guests, rooms)
        cached = self._cached(key)
        if cached is not None:
            return cached

        params: dict[str, str | int | float] = {
            "applicationId": self._application_id,
            "format": "json",
            "checkinDate": check_in.isoformat(),
            "checkoutDate": check_out.isoformat(),
            "latitude": latitude,
            "longitude": longitude,
            "searchRadius": self._search_radius_km,
            "adultNum": guests,
            "roomNum": rooms,
            "datumType": DATUM_TYPE_WGS84,
        }
        log_api_request("rakuten", "GET", RAKUTEN_VACANT_HOTEL_URL, params)

        rate_limiter = await ApiRateLimiter.get_instance("rakuten_api", self._min_delay_seconds)
        await rate_limiter.acquire()

        try:
            async with self._session.get(
                RAKUTEN_VACANT_HOTEL_URL, params=params, timeout=self._timeout
            ) as response:
                # 404 means no vacancies around the position
                if response.status != 200:
                    if response.status != 404:
                        logger.warning(f"Rakuten API returned status {response.status}")
                    return []
                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(f"Error searching Rakuten hotels: {e}")
            return []

        nights = max(1, (check_out - check_in).days)
        candidates = parse_vacant_hotels(data, nights)
        self._cache[key] = (date.today(), candidates)
        return candidates
