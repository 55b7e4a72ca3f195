"""Transit network state."""

from metro_stay.domain.models.line import Line
from metro_stay.domain.models.station import Station, StationGroup


class TransitNetwork:
    """Session-wide topology and adjacency of the rail network.

    Constructed empty, populated once by the graph builder and read-only
    afterwards. Station groups are derived from display-name equality when
    the topology is loaded.
    """

    def __init__(self) -> None:
        """Initialize an empty, unbuilt network."""
        self._lines: dict[str, Line] = {}
        self._line_station_ids: dict[str, list[str]] = {}
        self._stations: dict[str, Station] = {}
        self._groups: dict[str, StationGroup] = {}
        self._group_name_by_station: dict[str, str] = {}
        self.adjacency: dict[str, dict[str, int]] = {}
        self.is_built = False

    def load_topology(self, line_stations: list[tuple[Line, list[Station]]]) -> None:
        """Register lines with their ordered stations and derive station groups."""
        members_by_name: dict[str, list[Station]] = {}
        for line, stations in line_stations:
            self._lines[line.id] = line
            self._line_station_ids[line.id] = [station.id for station in stations]
            for station in stations:
                if station.id in self._stations:
                    continue
                self._stations[station.id] = station
                members_by_name.setdefault(station.name, []).append(station)

        for name, members in members_by_name.items():
            self._groups[name] = StationGroup(name=name, members=tuple(members))
            for station in members:
                self._group_name_by_station[station.id] = name

    def mark_built(self) -> None:
        """Mark the network as fully built."""
        self.is_built = True

    @property
    def lines(self) -> list[Line]:
        """All registered lines."""
        return list(self._lines.values())

    @property
    def groups(self) -> list[StationGroup]:
        """All station groups, in first-seen order."""
        return list(self._groups.values())

    def line(self, line_id: str) -> Line | None:
        """Look up a line by id."""
        return self._lines.get(line_id)

    def group(self, name: str) -> StationGroup | None:
        """Look up a station group by display name."""
        return self._groups.get(name)

    def group_name_of(self, station_id: str) -> str | None:
        """Display name of the group a station belongs to."""
        return self._group_name_by_station.get(station_id)

    def line_station_ids(self, line_id: str) -> list[str]:
        """Station ids of a line in physical order."""
        return self._line_station_ids.get(line_id, [])

    def station_order_index(self, line_id: str, station_id: str) -> int | None:
        """Position of a station along its line, or None when not on the line."""
        try:
            return self.line_station_ids(line_id).index(station_id)
        except ValueError:
            return None

    def neighbors(self, station_id: str) -> dict[str, int]:
        """Directly connected stations and the minutes to reach them."""
        return self.adjacency.get(station_id, {})
