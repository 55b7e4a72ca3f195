"""Candidate aggregator joining routes, fares and lodging offers."""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass
from datetime import date

from metro_stay.application.services.fare_resolver import FareResolver, FareTable
from metro_stay.domain.models.candidate import Candidate
from metro_stay.domain.models.fare import ZERO_FARE
from metro_stay.domain.models.route_result import RouteResult
from metro_stay.domain.models.scored_result import ScoredResult
from metro_stay.domain.models.search_request import SearchRequest
from metro_stay.domain.models.station import StationGroup
from metro_stay.domain.models.train_schedule import FirstLastTrains
from metro_stay.domain.models.transit_network import TransitNetwork
from metro_stay.domain.ports.lodging_provider import LodgingProvider
from metro_stay.domain.ports.train_schedule_provider import TrainScheduleProvider
from metro_stay.domain.ports.walking_time_provider import WalkingTimeProvider

logger = logging.getLogger(__name__)

WALKING_BATCH_SIZE = 3


@dataclass(frozen=True)
class AggregationProgress:
    """Aggregated drafts after a number of station groups were processed."""

    results: list[ScoredResult]
    processed_groups: int
    total_groups: int


class CandidateAggregator:
    """Queries lodging per station group and prices every offer.

    Station groups are processed strictly one after another with a fixed
    delay between lodging queries; walking-time lookups inside a group run
    in small concurrent batches.
    """

    def __init__(
        self,
        network: TransitNetwork,
        fare_resolver: FareResolver,
        lodging_provider: LodgingProvider,
        walking_time_provider: WalkingTimeProvider | None = None,
        train_schedule_provider: TrainScheduleProvider | None = None,
        group_delay_seconds: float = 1.0,
        walking_batch_size: int = WALKING_BATCH_SIZE,
    ) -> None:
        """Initialize the aggregator.

        Args:
            network: Built transit network.
            fare_resolver: Resolver for destination fares.
            lodging_provider: Source of lodging offers.
            walking_time_provider: Optional source of walking minutes.
            train_schedule_provider: Optional source of first/last trains.
            group_delay_seconds: Delay between successive lodging queries.
            walking_batch_size: Concurrent walking-time lookups per batch.
        """
        self._network = network
        self._fare_resolver = fare_resolver
        self._lodging_provider = lodging_provider
        self._walking_time_provider = walking_time_provider
        self._train_schedule_provider = train_schedule_provider
        self._group_delay_seconds = group_delay_seconds
        self._walking_batch_size = max(1, walking_batch_size)

    def best_routes_by_group(self, routes: dict[str, RouteResult]) -> dict[str, RouteResult]:
        """Collapse station routes to the fastest route per station group."""
        best: dict[str, RouteResult] = {}
        for station_id, route in routes.items():
            name = self._network.group_name_of(station_id)
            if name is None:
                continue
            current = best.get(name)
            if current is None or route.total_time < current.total_time:
                best[name] = route
        return best

    @staticmethod
    def order_groups(
        best_routes: dict[str, RouteResult], destination_name: str
    ) -> list[tuple[str, RouteResult]]:
        """Destination group first, then the others by ascending travel time."""
        ordered = []
        if destination_name in best_routes:
            ordered.append((destination_name, best_routes[destination_name]))
        others = sorted(
            ((name, route) for name, route in best_routes.items() if name != destination_name),
            key=lambda item: item[1].total_time,
        )
        ordered.extend(others)
        return ordered

    async def aggregate(
        self,
        request: SearchRequest,
        routes: dict[str, RouteResult],
        candidate_limit: Callable[[], int | None] | None = None,
    ) -> AsyncIterator[AggregationProgress]:
        """Aggregate lodging offers group by group.

        Yields the growing list of unscored results after every station group.

        Args:
            request: The search request.
            routes: Route results keyed by station id.
            candidate_limit: Returns the maximum offers taken from the next group,
                or None for all. Read once per group after its lodging query.
        """
        destination_group = self._network.group(request.destination_name)
        ordered = self.order_groups(self.best_routes_by_group(routes), request.destination_name)
        total = len(ordered)
        results: list[ScoredResult] = []
        if destination_group is None or not ordered:
            return

        fare_table = await self._fare_resolver.resolve(destination_group.members[0].id)

        for index, (name, route) in enumerate(ordered):
            if index > 0 and self._group_delay_seconds > 0:
                await asyncio.sleep(self._group_delay_seconds)

            group = self._network.group(name)
            if group is not None:
                try:
                    results.extend(
                        await self._process_group(
                            request, group, route, destination_group, fare_table, candidate_limit
                        )
                    )
                except Exception as e:
                    logger.warning(f"Skipping station group {name!r}: {e}")

            yield AggregationProgress(
                results=list(results), processed_groups=index + 1, total_groups=total
            )

    async def _process_group(
        self,
        request: SearchRequest,
        group: StationGroup,
        route: RouteResult,
        destination_group: StationGroup,
        fare_table: FareTable,
        candidate_limit: Callable[[], int | None] | None,
    ) -> list[ScoredResult]:
        anchor = group.members[0]
        candidates = await self._lodging_provider.search(
            anchor.latitude,
            anchor.longitude,
            request.check_in,
            request.check_out,
            request.guest_count,
            request.room_count,
        )
        if not candidates:
            logger.debug(f"No lodging offers near {group.name!r}")
            return []
        limit = candidate_limit() if candidate_limit is not None else None
        if limit is not None:
            candidates = candidates[:limit]

        is_destination = group.name == destination_group.name
        fare = ZERO_FARE if is_destination else fare_table.fare_to(route.station_id)
        walk_times = await self._walk_times(candidates, anchor.latitude, anchor.longitude)
        schedule = await self._train_schedule(route, destination_group, request.check_in)

        return [
            ScoredResult(
                result_id=f"{route.station_id}_{index}",
                station_name=group.name,
                station_id=route.station_id,
                candidate=candidate,
                ic_fare=fare.ic_fare,
                ticket_fare=fare.ticket_fare,
                train_time=route.total_time,
                walk_time=walk_time,
                transfers=route.transfers,
                lines=route.lines,
                total_cost=candidate.price
                + fare.ic_fare * 2 * request.guest_count * request.night_count,
                train_schedule=schedule,
            )
            for index, (candidate, walk_time) in enumerate(zip(candidates, walk_times, strict=True))
        ]

    async def _walk_times(
        self, candidates: list[Candidate], station_latitude: float, station_longitude: float
    ) -> list[int]:
        walk_times: list[int] = []
        for start in range(0, len(candidates), self._walking_batch_size):
            batch = candidates[start : start + self._walking_batch_size]
            walk_times.extend(
                await asyncio.gather(
                    *(
                        self._walk_time(candidate, station_latitude, station_longitude)
                        for candidate in batch
                    )
                )
            )
        return walk_times

    async def _walk_time(
        self, candidate: Candidate, station_latitude: float, station_longitude: float
    ) -> int:
        latitude, longitude = candidate.latitude, candidate.longitude
        if self._walking_time_provider is None or not latitude or not longitude:
            return 0
        if not station_latitude or not station_longitude:
            return 0
        try:
            minutes = await self._walking_time_provider.walk_minutes(
                latitude, longitude, station_latitude, station_longitude
            )
        except Exception as e:
            logger.warning(f"Walking time lookup failed for {candidate.name!r}: {e}")
            return 0
        return minutes or 0

    def travel_directions(
        self, route: RouteResult, destination_group: StationGroup
    ) -> tuple[str, str, str] | None:
        """Schedule lookup keys for a direct route.

        Returns:
            (destination station id, direction to the lodging, direction to
            the destination), or None when the route is not a direct ride.
        """
        if route.transfers != 0 or not route.lines:
            return None
        line_id = route.lines[0]
        line = self._network.line(line_id)
        destination_station = destination_group.member_on_line(line_id)
        if line is None or destination_station is None:
            return None

        hotel_index = self._network.station_order_index(line_id, route.station_id)
        destination_index = self._network.station_order_index(line_id, destination_station.id)
        if hotel_index is None or destination_index is None or hotel_index == destination_index:
            return None

        if hotel_index < destination_index:
            return destination_station.id, line.direction_descending, line.direction_ascending
        return destination_station.id, line.direction_ascending, line.direction_descending

    async def _train_schedule(
        self, route: RouteResult, destination_group: StationGroup, travel_date: date
    ) -> FirstLastTrains | None:
        if self._train_schedule_provider is None:
            return None
        directions = self.travel_directions(route, destination_group)
        if directions is None:
            return None
        destination_station_id, direction_to_hotel, direction_to_destination = directions
        if not direction_to_hotel or not direction_to_destination:
            return None
        return await self._train_schedule_provider.first_last_trains(
            destination_station_id,
            route.station_id,
            direction_to_hotel,
            direction_to_destination,
            travel_date,
            route.total_time,
        )
