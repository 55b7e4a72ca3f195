"""Scored result domain model."""

from dataclasses import dataclass

from metro_stay.domain.models.candidate import Candidate
from metro_stay.domain.models.train_schedule import FirstLastTrains


@dataclass(frozen=True)
class ScoredResult:
    """A lodging candidate joined with its route and fare data.

    Instances come out of aggregation with neutral annotations; every ranking
    pass builds fresh copies with the mode-specific annotations filled in.
    """

    result_id: str
    station_name: str
    station_id: str
    candidate: Candidate
    ic_fare: int
    ticket_fare: int
    train_time: int
    walk_time: int
    transfers: int
    lines: tuple[str, ...]
    total_cost: int
    train_schedule: FirstLastTrains | None = None
    # Annotations, recomputed on every ranking pass
    savings: float | None = None
    saved_money: int = 0
    extra_time: int = 0
    cospa_index: int = 0
    is_baseline: bool = False

    @property
    def travel_time(self) -> int:
        """Door-to-station travel time: minutes on the train plus walking."""
        return self.train_time + self.walk_time

    @property
    def price_with_round_trip_fare(self) -> int:
        """Lodging price plus a single traveller's round-trip IC fare."""
        return self.candidate.price + self.ic_fare * 2
