"""Stay search pipeline from destination to ranked lodging results."""

import logging
from contextlib import aclosing
from dataclasses import dataclass, field

from metro_stay.application.services.candidate_aggregator import CandidateAggregator
from metro_stay.application.services.network_loader import TransitNetworkLoader
from metro_stay.application.services.ranking_engine import rank_results
from metro_stay.application.services.route_search import RouteSearch
from metro_stay.domain.contracts.result_sink import ResultSinkProtocol
from metro_stay.domain.contracts.run_token import RunTokenProtocol
from metro_stay.domain.models.ranking_mode import RankingMode
from metro_stay.domain.models.scored_result import ScoredResult
from metro_stay.domain.models.search_request import SearchRequest
from metro_stay.domain.models.search_snapshot import SearchSnapshot
from metro_stay.domain.models.transit_network import TransitNetwork

logger = logging.getLogger(__name__)

MAX_CANDIDATES_PER_STATION = 5


@dataclass
class SearchSession:
    """Aggregated data and current ranking of one search run."""

    request: SearchRequest
    mode: RankingMode
    drafts: list[ScoredResult] = field(default_factory=list)
    results: list[ScoredResult] = field(default_factory=list)
    processed_groups: int = 0
    total_groups: int = 0
    is_complete: bool = False
    is_superseded: bool = False


class StaySearchService:
    """Runs lodging searches and re-ranks their results."""

    def __init__(
        self,
        network: TransitNetwork,
        network_loader: TransitNetworkLoader,
        route_search: RouteSearch,
        aggregator: CandidateAggregator,
        max_candidates_per_station: int = MAX_CANDIDATES_PER_STATION,
        default_mode: RankingMode = RankingMode.COSPA,
    ) -> None:
        """Initialize with the session network and core components."""
        self._network = network
        self._network_loader = network_loader
        self._route_search = route_search
        self._aggregator = aggregator
        self._max_candidates_per_station = max_candidates_per_station
        self._default_mode = default_mode

    @property
    def network(self) -> TransitNetwork:
        """The session transit network."""
        return self._network

    async def initialize(self) -> TransitNetwork:
        """Build the transit network unless it is already built."""
        return await self._network_loader.load(self._network)

    async def search(
        self,
        request: SearchRequest,
        sink: ResultSinkProtocol,
        run_token: RunTokenProtocol | None = None,
        mode: RankingMode | None = None,
    ) -> SearchSession:
        """Search lodging around every station reachable from the destination.

        A ranked snapshot is published after every station group and once
        more when the run completes. Publishing stops as soon as the run
        token reports that a newer run has started.

        Args:
            request: The search request.
            sink: Receiver of ranked snapshots.
            run_token: Optional token telling whether this run is still current.
            mode: Ranking mode, defaults to the configured one.

        Returns:
            The session holding the aggregated drafts and the last ranking.

        Raises:
            NetworkNotBuiltError: If initialize() has not completed.
        """
        return await self.run(self.start_session(request, mode), sink, run_token)

    def start_session(
        self, request: SearchRequest, mode: RankingMode | None = None
    ) -> SearchSession:
        """Create the session of a search that has not started yet."""
        return SearchSession(request=request, mode=mode or self._default_mode)

    async def run(
        self,
        session: SearchSession,
        sink: ResultSinkProtocol,
        run_token: RunTokenProtocol | None = None,
    ) -> SearchSession:
        """Run a search for a session created by start_session().

        The session can be re-ranked while the run is in progress.
        """
        request = session.request
        routes = self._route_search.find_routes(request.destination_name)
        logger.info(
            f"Searching lodging for {request.destination_name!r}: "
            f"{len(routes)} reachable station(s), mode={session.mode}"
        )

        progress_stream = self._aggregator.aggregate(
            request, routes, lambda: self.candidate_limit(session.mode)
        )
        async with aclosing(progress_stream) as progress_updates:
            async for progress in progress_updates:
                session.drafts = progress.results
                session.processed_groups = progress.processed_groups
                session.total_groups = progress.total_groups
                if not await self._publish(session, sink, run_token):
                    return session

        session.is_complete = True
        await self._publish(session, sink, run_token)
        logger.info(
            f"Search for {request.destination_name!r} finished with {len(session.results)} result(s)"
        )
        return session

    def candidate_limit(self, mode: RankingMode) -> int | None:
        """Offers taken per station group, or None when every offer is kept."""
        return None if mode == RankingMode.RATING else self._max_candidates_per_station

    def rerank(self, session: SearchSession, mode: RankingMode) -> list[ScoredResult]:
        """Re-rank already aggregated results for another mode.

        No provider is queried. Later snapshots and station groups of a still
        running search use the new mode as well.
        """
        session.mode = mode
        session.results = rank_results(session.drafts, mode, session.request.destination_name)
        return session.results

    async def _publish(
        self,
        session: SearchSession,
        sink: ResultSinkProtocol,
        run_token: RunTokenProtocol | None,
    ) -> bool:
        if run_token is not None and not run_token.is_current():
            session.is_superseded = True
            logger.info(f"Search for {session.request.destination_name!r} superseded, stopping")
            return False

        session.results = rank_results(
            session.drafts, session.mode, session.request.destination_name
        )
        await sink.publish(
            SearchSnapshot(
                results=session.results,
                mode=session.mode,
                processed_groups=session.processed_groups,
                total_groups=session.total_groups,
                is_final=session.is_complete,
            )
        )
        return True
