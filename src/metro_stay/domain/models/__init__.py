"""Domain models for metro stay search."""

from metro_stay.domain.models.candidate import Candidate
from metro_stay.domain.models.errors import NetworkNotBuiltError
from metro_stay.domain.models.fare import ZERO_FARE, Fare, FareQuote
from metro_stay.domain.models.line import Line
from metro_stay.domain.models.ranking_mode import RankingMode
from metro_stay.domain.models.route_result import RouteResult
from metro_stay.domain.models.scored_result import ScoredResult
from metro_stay.domain.models.search_request import SearchRequest
from metro_stay.domain.models.search_snapshot import SearchSnapshot
from metro_stay.domain.models.station import Station, StationGroup
from metro_stay.domain.models.timetable_segment import TimetableSegment
from metro_stay.domain.models.train_schedule import FirstLastTrains, TrainInfo
from metro_stay.domain.models.transit_network import TransitNetwork

__all__ = [
    "ZERO_FARE",
    "Candidate",
    "Fare",
    "FareQuote",
    "FirstLastTrains",
    "Line",
    "NetworkNotBuiltError",
    "RankingMode",
    "RouteResult",
    "ScoredResult",
    "SearchRequest",
    "SearchSnapshot",
    "Station",
    "StationGroup",
    "TimetableSegment",
    "TrainInfo",
    "TransitNetwork",
]
