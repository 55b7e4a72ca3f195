"""Route result domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteResult:
    """Best route found from the destination to one station."""

    station_id: str
    total_time: int
    transfers: int
    lines: tuple[str, ...]
    source_station_id: str  # Destination-side station the route starts from
