"""Fare resolver with symmetric lookup and fallback pricing."""

import logging

from metro_stay.domain.models.fare import ZERO_FARE, Fare
from metro_stay.domain.ports.fare_provider import FareProvider

logger = logging.getLogger(__name__)

FALLBACK_FARE_YEN = 200


class FareTable:
    """Fares from one destination station to every other station."""

    def __init__(self, resolver: "FareResolver", destination_station_id: str) -> None:
        """Bind the table to a resolver and its destination station."""
        self._resolver = resolver
        self.destination_station_id = destination_station_id

    def fare_to(self, station_id: str) -> Fare:
        """One-way fare between the destination and a station."""
        return self._resolver.fare_between(self.destination_station_id, station_id)

    def __getitem__(self, station_id: str) -> Fare:
        return self.fare_to(station_id)


class FareResolver:
    """Session-wide fare cache filled from a fare provider.

    Fares are stored per unordered station pair, so a lookup in either
    direction returns the same value. Pairs missing from the source table
    resolve to a fixed fallback fare.
    """

    def __init__(
        self, fare_provider: FareProvider | None, fallback_fare: int = FALLBACK_FARE_YEN
    ) -> None:
        """Initialize with an optional fare provider and the fallback fare."""
        self._fare_provider = fare_provider
        self._fallback = Fare(ic_fare=fallback_fare, ticket_fare=fallback_fare)
        self._fares: dict[tuple[str, str], Fare] = {}
        self._fetched_origins: set[str] = set()

    async def resolve(self, destination_station_id: str) -> FareTable:
        """Fetch fares from a destination station once and return its fare table."""
        if destination_station_id not in self._fetched_origins:
            self._fetched_origins.add(destination_station_id)
            await self._fetch(destination_station_id)
        return FareTable(self, destination_station_id)

    def fare_between(self, station_a: str, station_b: str) -> Fare:
        """Symmetric one-way fare between two stations."""
        if station_a == station_b:
            return ZERO_FARE
        return self._fares.get(self._pair_key(station_a, station_b), self._fallback)

    async def _fetch(self, origin_station_id: str) -> None:
        if self._fare_provider is None:
            logger.warning("No fare provider configured, using fallback fares")
            return

        try:
            quotes = await self._fare_provider.fares_from(origin_station_id)
        except Exception as e:
            logger.warning(f"Failed to fetch fares from {origin_station_id}: {e}")
            return

        for quote in quotes:
            # First fare seen for an unordered pair wins
            self._fares.setdefault(
                self._pair_key(origin_station_id, quote.to_station_id),
                Fare(ic_fare=quote.ic_fare, ticket_fare=quote.ticket_fare),
            )
        logger.debug(f"Cached {len(quotes)} fare(s) from {origin_station_id}")

    @staticmethod
    def _pair_key(station_a: str, station_b: str) -> tuple[str, str]:
        return (station_a, station_b) if station_a <= station_b else (station_b, station_a)
