"""Topology provider port."""

from typing import Protocol

from metro_stay.domain.models.line import Line
from metro_stay.domain.models.station import Station


class TopologyProvider(Protocol):
    """Port for retrieving rail lines and their stations."""

    async def list_lines(self) -> list[Line]:
        """List all lines of the network."""
        ...

    async def stations_of(self, line: Line) -> list[Station]:
        """Get the stations of a line in physical line order."""
        ...
