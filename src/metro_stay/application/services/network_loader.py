"""Transit network loader fetching topology and timetables from providers."""

import logging

from metro_stay.application.services.graph_builder import GraphBuilder
from metro_stay.domain.models.line import Line
from metro_stay.domain.models.station import Station
from metro_stay.domain.models.timetable_segment import TimetableSegment
from metro_stay.domain.models.transit_network import TransitNetwork
from metro_stay.domain.ports.timetable_provider import TimetableProvider
from metro_stay.domain.ports.topology_provider import TopologyProvider

logger = logging.getLogger(__name__)


class TransitNetworkLoader:
    """Fetches every line from the providers and builds the network once."""

    def __init__(
        self,
        topology_provider: TopologyProvider,
        timetable_provider: TimetableProvider | None = None,
        graph_builder: GraphBuilder | None = None,
    ) -> None:
        """Initialize with the topology and optional timetable providers."""
        self._topology_provider = topology_provider
        self._timetable_provider = timetable_provider
        self._graph_builder = graph_builder or GraphBuilder()

    async def load(self, network: TransitNetwork) -> TransitNetwork:
        """Build the network unless it is already built.

        A failing line is logged and skipped; the remaining lines are still
        loaded.
        """
        if network.is_built:
            return network

        lines = await self._topology_provider.list_lines()
        line_stations: list[tuple[Line, list[Station]]] = []
        segments_by_line: dict[str, list[TimetableSegment]] = {}

        for line in lines:
            stations = await self._fetch_stations(line)
            if not stations:
                logger.warning(f"No stations for line {line.id}, skipping")
                continue
            line_stations.append((line, stations))
            segments_by_line[line.id] = await self._fetch_segments(line)

        self._graph_builder.build(network, line_stations, segments_by_line)
        return network

    async def _fetch_stations(self, line: Line) -> list[Station]:
        try:
            return await self._topology_provider.stations_of(line)
        except Exception as e:
            logger.warning(f"Failed to fetch stations of line {line.id}: {e}")
            return []

    async def _fetch_segments(self, line: Line) -> list[TimetableSegment]:
        if self._timetable_provider is None:
            return []
        try:
            return await self._timetable_provider.sample_segments(line)
        except Exception as e:
            logger.warning(f"Failed to fetch timetable samples of line {line.id}: {e}")
            return []
