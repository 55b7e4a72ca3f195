"""First and last train domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TrainInfo:
    """A single train departure with its computed arrival."""

    departure_time: str
    arrival_time: str
    destination: str


@dataclass(frozen=True)
class FirstLastTrains:
    """Last train towards the lodging and first train back to the destination."""

    last_train: TrainInfo | None = None
    first_train: TrainInfo | None = None
