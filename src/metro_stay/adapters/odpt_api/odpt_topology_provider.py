"""ODPT topology provider adapter."""

import logging

from metro_stay.adapters.odpt_api.constants import RAILWAY, STATION
from metro_stay.adapters.odpt_api.http_client import OdptHttpClient
from metro_stay.adapters.odpt_api.parsers import parse_ordered_stations
from metro_stay.domain.models.line import Line
from metro_stay.domain.models.station import Station
from metro_stay.domain.ports.topology_provider import TopologyProvider

logger = logging.getLogger(__name__)


class OdptTopologyProvider(TopologyProvider):
    """Provides configured lines and their ODPT station lists."""

    def __init__(self, http_client: OdptHttpClient, lines: list[Line]) -> None:
        """Initialize with an ODPT client and the lines of the network."""
        self._http_client = http_client
        self._lines = list(lines)

    async def list_lines(self) -> list[Line]:
        """List the configured lines."""
        return list(self._lines)

    async def stations_of(self, line: Line) -> list[Station]:
        """Fetch the stations of a line in physical order."""
        railways = await self._http_client.get_resources(RAILWAY, {"owl:sameAs": line.id})
        stations_raw = await self._http_client.get_resources(STATION, {"odpt:railway": line.id})
        if not stations_raw:
            return []

        stations = parse_ordered_stations(line.id, railways[0] if railways else None, stations_raw)
        logger.info(f"{line.name}: {len(stations)} station(s)")
        return stations
