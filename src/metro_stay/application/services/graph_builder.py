"""Graph builder turning line topology and timetable samples into adjacency."""

import logging

from metro_stay.domain.models.line import Line
from metro_stay.domain.models.station import Station
from metro_stay.domain.models.timetable_segment import TimetableSegment
from metro_stay.domain.models.transit_network import TransitNetwork

logger = logging.getLogger(__name__)

DEFAULT_EDGE_MINUTES = 2
MAX_SEGMENT_MINUTES = 60


class GraphBuilder:
    """Builds the weighted, directed station adjacency of a TransitNetwork."""

    def __init__(self, default_edge_minutes: int = DEFAULT_EDGE_MINUTES) -> None:
        """Initialize the builder.

        Args:
            default_edge_minutes: Minutes assumed between adjacent stations
                when no timetable sample covers the pair.
        """
        self._default_edge_minutes = default_edge_minutes

    def build(
        self,
        network: TransitNetwork,
        line_stations: list[tuple[Line, list[Station]]],
        segments_by_line: dict[str, list[TimetableSegment]] | None = None,
    ) -> None:
        """Populate the network once; later calls are no-ops.

        Args:
            network: Network state to populate.
            line_stations: Lines with their stations in physical order.
            segments_by_line: Optional timetable samples keyed by line id.
        """
        if network.is_built:
            logger.debug("Transit network already built, skipping")
            return

        network.load_topology(line_stations)
        network.adjacency = self.build_adjacency(line_stations, segments_by_line or {})
        network.mark_built()
        logger.info(
            f"Built transit network: {len(network.lines)} line(s), "
            f"{len(network.groups)} station group(s), {len(network.adjacency)} connected station(s)"
        )

    def build_adjacency(
        self,
        line_stations: list[tuple[Line, list[Station]]],
        segments_by_line: dict[str, list[TimetableSegment]],
    ) -> dict[str, dict[str, int]]:
        """Compute adjacency minutes from topology and timetable samples."""
        adjacency: dict[str, dict[str, int]] = {}

        for line, stations in line_stations:
            try:
                self._add_default_edges(adjacency, stations)
            except Exception as e:
                logger.warning(f"Skipping topology of line {line.id}: {e}")

        for line, _ in line_stations:
            try:
                self._apply_segments(adjacency, segments_by_line.get(line.id, []))
            except Exception as e:
                logger.warning(f"Skipping timetable samples of line {line.id}: {e}")

        return adjacency

    def _add_default_edges(
        self, adjacency: dict[str, dict[str, int]], stations: list[Station]
    ) -> None:
        for current, following in zip(stations, stations[1:], strict=False):
            adjacency.setdefault(current.id, {}).setdefault(following.id, self._default_edge_minutes)
            adjacency.setdefault(following.id, {}).setdefault(current.id, self._default_edge_minutes)

    @staticmethod
    def _apply_segments(
        adjacency: dict[str, dict[str, int]],
        segments: list[TimetableSegment],
    ) -> None:
        for segment in segments:
            try:
                minutes = segment.minutes
            except ValueError:
                logger.debug(f"Unparseable timetable segment: {segment}")
                continue
            if not 0 < minutes < MAX_SEGMENT_MINUTES:
                continue
            # Known pairs keep their first weight, default edges included
            for pair in (
                (segment.from_station_id, segment.to_station_id),
                (segment.to_station_id, segment.from_station_id),
            ):
                adjacency.setdefault(pair[0], {}).setdefault(pair[1], minutes)
