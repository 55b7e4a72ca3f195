"""Fare domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Fare:
    """One-way fare between two stations in both payment forms."""

    ic_fare: int
    ticket_fare: int


ZERO_FARE = Fare(ic_fare=0, ticket_fare=0)


@dataclass(frozen=True)
class FareQuote:
    """A fare-table row as delivered by a fare provider."""

    to_station_id: str
    ic_fare: int
    ticket_fare: int
