"""Bounded-transfer route search from a destination to every station."""

import heapq
import itertools
import logging
from dataclasses import dataclass

from metro_stay.domain.models.errors import NetworkNotBuiltError
from metro_stay.domain.models.route_result import RouteResult
from metro_stay.domain.models.transit_network import TransitNetwork

logger = logging.getLogger(__name__)

TRANSFER_PENALTY_MINUTES = 5
MAX_TRANSFERS = 1


@dataclass(frozen=True)
class _Label:
    station_id: str
    time: int
    transfers: int
    lines: tuple[str, ...]
    source_station_id: str


class RouteSearch:
    """Multi-source Dijkstra run backward from every station of a destination group.

    Same-line hops follow the network adjacency. A transfer moves to another
    station of the same group at a fixed penalty and is only allowed while
    the path is below the transfer budget.
    """

    def __init__(
        self,
        network: TransitNetwork,
        transfer_penalty_minutes: int = TRANSFER_PENALTY_MINUTES,
        max_transfers: int = MAX_TRANSFERS,
    ) -> None:
        """Initialize with a network and search limits."""
        self._network = network
        self._transfer_penalty_minutes = transfer_penalty_minutes
        self._max_transfers = max_transfers

    def find_routes(
        self, destination_name: str, max_transfers: int | None = None
    ) -> dict[str, RouteResult]:
        """Compute the best route to every station reachable from a destination.

        Args:
            destination_name: Display name of the destination station group.
            max_transfers: Transfer budget, defaults to the configured one.

        Returns:
            Route results keyed by station id.

        Raises:
            NetworkNotBuiltError: If the network has not been built yet.
        """
        if not self._network.is_built:
            raise NetworkNotBuiltError("Transit network must be built before searching routes")

        budget = self._max_transfers if max_transfers is None else max_transfers
        group = self._network.group(destination_name)
        if group is None or not group.members:
            logger.info(f"No stations named {destination_name!r}")
            return {}

        sequence = itertools.count()
        frontier: list[tuple[int, int, _Label]] = []
        best_time: dict[str, int] = {}
        results: dict[str, RouteResult] = {}

        def push(label: _Label) -> None:
            if label.station_id in results:
                return
            known = best_time.get(label.station_id)
            if known is not None and known <= label.time:
                return
            best_time[label.station_id] = label.time
            heapq.heappush(frontier, (label.time, next(sequence), label))

        for station in group.members:
            push(_Label(station.id, 0, 0, (station.line_id,), station.id))

        while frontier:
            _, _, label = heapq.heappop(frontier)
            if label.station_id in results:
                continue

            results[label.station_id] = RouteResult(
                station_id=label.station_id,
                total_time=label.time,
                transfers=label.transfers,
                lines=label.lines,
                source_station_id=label.source_station_id,
            )

            for next_id, minutes in self._network.neighbors(label.station_id).items():
                push(
                    _Label(
                        next_id,
                        label.time + minutes,
                        label.transfers,
                        label.lines,
                        label.source_station_id,
                    )
                )

            if label.transfers < budget:
                for label_next in self._transfer_labels(label):
                    push(label_next)

        logger.debug(f"Found {len(results)} reachable station(s) for {destination_name!r}")
        return results

    def _transfer_labels(self, label: _Label) -> list[_Label]:
        group_name = self._network.group_name_of(label.station_id)
        group = self._network.group(group_name) if group_name else None
        if group is None:
            return []

        labels = []
        for sibling in group.members:
            if sibling.id == label.station_id:
                continue
            lines = label.lines if sibling.line_id in label.lines else (*label.lines, sibling.line_id)
            labels.append(
                _Label(
                    sibling.id,
                    label.time + self._transfer_penalty_minutes,
                    label.transfers + 1,
                    lines,
                    label.source_station_id,
                )
            )
        return labels
