"""Fare table provider port."""

from typing import Protocol

from metro_stay.domain.models.fare import FareQuote


class FareProvider(Protocol):
    """Port for retrieving fares from one station to all others.

    Best effort: implementations return an empty list on failure.
    """

    async def fares_from(self, station_id: str) -> list[FareQuote]:
        """Get fare-table rows originating at a station."""
        ...
