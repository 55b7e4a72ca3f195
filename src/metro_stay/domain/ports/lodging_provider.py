"""Lodging provider port."""

from datetime import date
from typing import Protocol

from metro_stay.domain.models.candidate import Candidate


class LodgingProvider(Protocol):
    """Port for searching lodging offers around a position.

    An empty list means there are no offers, not an error.
    """

    async def search(
        self,
        latitude: float,
        longitude: float,
        check_in: date,
        check_out: date,
        guests: int,
        rooms: int,
    ) -> list[Candidate]:
        """Search vacant lodging around a position for the given stay."""
        ...
