"""Rail line domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """A rail line with its display metadata and traversal directions."""

    id: str
    name: str
    color: str = ""
    reference_station_id: str = ""  # Distance origin for display, unused by the search
    direction_ascending: str = ""  # Direction towards the end of the station order
    direction_descending: str = ""  # Direction towards the start of the station order
