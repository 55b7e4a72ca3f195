"""Station and station group domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """A line-specific station record.

    Several stations may share one display name when a physical location is
    served by more than one line; those stations form a StationGroup.
    """

    id: str
    name: str
    latitude: float
    longitude: float
    line_id: str


@dataclass(frozen=True)
class StationGroup:
    """All line-specific stations sharing one display name."""

    name: str
    members: tuple[Station, ...]

    @property
    def station_ids(self) -> list[str]:
        """Ids of all member stations, in membership order."""
        return [station.id for station in self.members]

    def member_on_line(self, line_id: str) -> Station | None:
        """Return the member station served by the given line, if any."""
        for station in self.members:
            if station.line_id == line_id:
                return station
        return None
