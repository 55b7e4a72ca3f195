"""Tests for the candidate aggregator."""

import asyncio
from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from metro_stay.application.services.candidate_aggregator import CandidateAggregator
from metro_stay.application.services.fare_resolver import FareResolver
from metro_stay.application.services.graph_builder import GraphBuilder
from metro_stay.application.services.route_search import RouteSearch
from metro_stay.domain.models import (
    Candidate,
    FareQuote,
    FirstLastTrains,
    Line,
    SearchRequest,
    Station,
    TrainInfo,
    TransitNetwork,
)

LINE_L = Line(id="L", name="Line L", direction_ascending="L.Up", direction_descending="L.Down")
LINE_M = Line(id="M", name="Line M", direction_ascending="M.Up", direction_descending="M.Down")

LATITUDES = {"Dest": 35.00, "A": 35.01, "Hub": 35.02, "C": 35.03}


def _network() -> TransitNetwork:
    network = TransitNetwork()
    GraphBuilder().build(
        network,
        [
            (
                LINE_L,
                [
                    Station("L.Dest", "Dest", LATITUDES["Dest"], 139.7, "L"),
                    Station("L.A", "A", LATITUDES["A"], 139.7, "L"),
                    Station("L.Hub", "Hub", LATITUDES["Hub"], 139.7, "L"),
                ],
            ),
            (
                LINE_M,
                [
                    Station("M.Hub", "Hub", 35.021, 139.7, "M"),
                    Station("M.C", "C", LATITUDES["C"], 139.7, "M"),
                ],
            ),
        ],
    )
    return network


def _request() -> SearchRequest:
    return SearchRequest(
        destination_name="Dest",
        check_in=date(2026, 3, 1),
        check_out=date(2026, 3, 3),
        guest_count=2,
    )


class MockLodgingProvider:
    """Lodging provider returning offers per group latitude."""

    def __init__(self, offers: dict[str, list[Candidate]], failing: set[str] | None = None):
        self.offers = offers
        self.failing = failing or set()
        self.calls: list[str] = []

    async def search(self, latitude, longitude, check_in, check_out, guests, rooms):
        name = next(name for name, lat in LATITUDES.items() if lat == latitude)
        self.calls.append(name)
        if name in self.failing:
            raise RuntimeError("lodging API down")
        return self.offers.get(name, [])


class MockFareProvider:
    """Fare provider with fares from the destination station."""

    async def fares_from(self, station_id: str) -> list[FareQuote]:
        return [FareQuote("L.A", 170, 180), FareQuote("L.Hub", 210, 220)]


class MockScheduleProvider:
    """Train schedule provider recording its lookups."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    async def first_last_trains(self, *args) -> FirstLastTrains:
        self.calls.append(args)
        return FirstLastTrains(last_train=TrainInfo("23:50", "23:52", "A"))


def _offer(name: str, price: int, latitude: float | None = 35.0) -> Candidate:
    return Candidate(id=name, name=name, price=price, latitude=latitude, longitude=139.7)


def _aggregator(
    network: TransitNetwork, lodging: MockLodgingProvider, **kwargs
) -> CandidateAggregator:
    return CandidateAggregator(
        network,
        FareResolver(MockFareProvider()),
        lodging,
        group_delay_seconds=0,
        **kwargs,
    )


async def _collect(aggregator: CandidateAggregator, network: TransitNetwork, **kwargs) -> list:
    routes = RouteSearch(network).find_routes("Dest")
    return [progress async for progress in aggregator.aggregate(_request(), routes, **kwargs)]


def test_best_routes_by_group_keeps_fastest_member() -> None:
    """Given a group reachable via two stations, when collapsing, then the fastest route is kept."""
    network = _network()
    routes = RouteSearch(network).find_routes("Dest")

    best = _aggregator(network, MockLodgingProvider({})).best_routes_by_group(routes)

    assert best["Hub"].station_id == "L.Hub"
    assert best["Hub"].total_time == 4
    assert set(best) == {"Dest", "A", "Hub", "C"}


@pytest.mark.asyncio
async def test_groups_are_queried_destination_first_then_by_time() -> None:
    """Given reachable groups, when aggregating, then lodging is queried in travel-time order."""
    network = _network()
    lodging = MockLodgingProvider({})

    progress = await _collect(_aggregator(network, lodging), network)

    assert lodging.calls == ["Dest", "A", "Hub", "C"]
    assert [p.processed_groups for p in progress] == [1, 2, 3, 4]
    assert all(p.total_groups == 4 for p in progress)


@pytest.mark.asyncio
async def test_total_cost_includes_round_trip_fares_for_every_guest_and_night() -> None:
    """Given two guests and two nights, when aggregating, then fares are multiplied in."""
    network = _network()
    lodging = MockLodgingProvider(
        {
            "Dest": [_offer("dest_hotel", 12000)],
            "A": [_offer("a_hotel", 10000)],
            "C": [_offer("c_hotel", 8000)],
        }
    )

    progress = await _collect(_aggregator(network, lodging), network)
    by_id = {r.candidate.id: r for r in progress[-1].results}

    assert by_id["dest_hotel"].ic_fare == 0
    assert by_id["dest_hotel"].total_cost == 12000
    assert by_id["a_hotel"].ic_fare == 170
    assert by_id["a_hotel"].ticket_fare == 180
    assert by_id["a_hotel"].total_cost == 10000 + 170 * 2 * 2 * 2
    assert by_id["c_hotel"].ic_fare == 200
    assert by_id["c_hotel"].transfers == 1
    assert by_id["c_hotel"].lines == ("L", "M")
    assert by_id["a_hotel"].result_id == "L.A_0"


@pytest.mark.asyncio
async def test_results_grow_after_every_group() -> None:
    """Given offers in several groups, when aggregating, then each snapshot extends the last."""
    network = _network()
    lodging = MockLodgingProvider({"Dest": [_offer("d", 9000)], "Hub": [_offer("h", 7000)]})

    progress = await _collect(_aggregator(network, lodging), network)

    assert [len(p.results) for p in progress] == [1, 1, 2, 2]


@pytest.mark.asyncio
async def test_candidate_limit_caps_offers_per_group() -> None:
    """Given many offers, when aggregating with a limit, then only the first ones are kept."""
    network = _network()
    offers = [_offer(f"hotel_{i}", 5000 + i) for i in range(8)]
    lodging = MockLodgingProvider({"A": offers})

    limited = await _collect(_aggregator(network, lodging), network, candidate_limit=lambda: 5)
    unlimited = await _collect(_aggregator(network, lodging), network)

    assert [r.candidate.id for r in limited[-1].results] == [f"hotel_{i}" for i in range(5)]
    assert len(unlimited[-1].results) == 8


@pytest.mark.asyncio
async def test_failing_group_is_skipped() -> None:
    """Given a lodging failure for one group, when aggregating, then the others still count."""
    network = _network()
    lodging = MockLodgingProvider(
        {"Dest": [_offer("d", 9000)], "C": [_offer("c", 7000)]}, failing={"A"}
    )

    progress = await _collect(_aggregator(network, lodging), network)

    assert [r.candidate.id for r in progress[-1].results] == ["d", "c"]
    assert progress[-1].processed_groups == 4


@pytest.mark.asyncio
async def test_walking_time_defaults_to_zero() -> None:
    """Given missing, failing and known walks, when aggregating, then unknown walks are 0."""
    network = _network()
    offers = [
        _offer("known", 5000),
        _offer("none", 5000),
        _offer("fails", 5000),
        _offer("nopos", 5000, latitude=None),
    ]
    lodging = MockLodgingProvider({"A": offers})

    class MockWalkingProvider:
        def __init__(self) -> None:
            self.calls = 0

        async def walk_minutes(self, from_lat, from_lng, to_lat, to_lng):
            self.calls += 1
            if self.calls == 1:
                return 6
            if self.calls == 2:
                return None
            raise RuntimeError("routing down")

    walking = MockWalkingProvider()
    progress = await _collect(
        _aggregator(network, lodging, walking_time_provider=walking, walking_batch_size=1), network
    )
    walk_times = {r.candidate.id: r.walk_time for r in progress[-1].results}

    assert walk_times == {"known": 6, "none": 0, "fails": 0, "nopos": 0}
    assert walking.calls == 3


@pytest.mark.asyncio
async def test_walking_lookups_run_in_bounded_batches() -> None:
    """Given seven offers and batch size three, when aggregating, then at most three run at once."""
    network = _network()
    lodging = MockLodgingProvider({"A": [_offer(f"h{i}", 5000) for i in range(7)]})
    running = 0
    peak = 0

    class SlowWalkingProvider:
        async def walk_minutes(self, from_lat, from_lng, to_lat, to_lng):
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1
            return 4

    progress = await _collect(
        _aggregator(network, lodging, walking_time_provider=SlowWalkingProvider()), network
    )

    assert peak == 3
    assert all(r.walk_time == 4 for r in progress[-1].results)


@pytest.mark.asyncio
async def test_train_schedule_only_for_direct_routes() -> None:
    """Given direct and transfer routes, when aggregating, then only direct ones get schedules."""
    network = _network()
    lodging = MockLodgingProvider(
        {"Dest": [_offer("d", 9000)], "A": [_offer("a", 8000)], "C": [_offer("c", 7000)]}
    )
    schedule = MockScheduleProvider()

    progress = await _collect(
        _aggregator(network, lodging, train_schedule_provider=schedule), network
    )
    by_id = {r.candidate.id: r for r in progress[-1].results}

    assert schedule.calls == [("L.Dest", "L.A", "L.Up", "L.Down", date(2026, 3, 1), 2)]
    assert by_id["a"].train_schedule is not None
    assert by_id["d"].train_schedule is None
    assert by_id["c"].train_schedule is None


def test_travel_directions_follow_station_order() -> None:
    """Given stations on both sides, when deriving directions, then the order index decides."""
    network = _network()
    aggregator = _aggregator(network, MockLodgingProvider({}))
    routes = RouteSearch(network).find_routes("A")
    destination_group = network.group("A")
    assert destination_group is not None

    towards_start = aggregator.travel_directions(routes["L.Dest"], destination_group)
    towards_end = aggregator.travel_directions(routes["L.Hub"], destination_group)

    assert towards_start == ("L.A", "L.Down", "L.Up")
    assert towards_end == ("L.A", "L.Up", "L.Down")
    assert aggregator.travel_directions(routes["M.C"], destination_group) is None


@pytest.mark.asyncio
async def test_delay_is_applied_between_groups() -> None:
    """Given a group delay, when aggregating four groups, then it is awaited three times."""
    network = _network()
    aggregator = CandidateAggregator(
        network, FareResolver(None), MockLodgingProvider({}), group_delay_seconds=1.0
    )
    routes = RouteSearch(network).find_routes("Dest")

    with patch(
        "metro_stay.application.services.candidate_aggregator.asyncio.sleep",
        new_callable=AsyncMock,
    ) as mock_sleep:
        progress = [p async for p in aggregator.aggregate(_request(), routes)]

    assert len(progress) == 4
    assert mock_sleep.await_count == 3
    mock_sleep.assert_awaited_with(1.0)


@pytest.mark.asyncio
async def test_unknown_destination_yields_nothing() -> None:
    """Given no routes for an unknown destination, when aggregating, then nothing is yielded."""
    network = _network()
    request = SearchRequest(
        destination_name="Nowhere", check_in=date(2026, 3, 1), check_out=date(2026, 3, 2)
    )
    aggregator = _aggregator(network, MockLodgingProvider({}))

    progress = [p async for p in aggregator.aggregate(request, {})]

    assert progress == []
