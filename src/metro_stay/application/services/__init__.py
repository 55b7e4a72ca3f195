"""Application services (use cases) for metro stay search."""

from metro_stay.application.services.baseline_selector import (
    select_baseline,
    select_cospa_baseline,
)
from metro_stay.application.services.candidate_aggregator import (
    AggregationProgress,
    CandidateAggregator,
)
from metro_stay.application.services.fare_resolver import FareResolver, FareTable
from metro_stay.application.services.graph_builder import GraphBuilder
from metro_stay.application.services.network_loader import TransitNetworkLoader
from metro_stay.application.services.ranking_engine import annotate_results, rank_results
from metro_stay.application.services.route_search import RouteSearch
from metro_stay.application.services.stay_search_service import (
    SearchSession,
    StaySearchService,
)

__all__ = [
    "AggregationProgress",
    "CandidateAggregator",
    "FareResolver",
    "FareTable",
    "GraphBuilder",
    "RouteSearch",
    "SearchSession",
    "StaySearchService",
    "TransitNetworkLoader",
    "annotate_results",
    "rank_results",
    "select_baseline",
    "select_cospa_baseline",
]
