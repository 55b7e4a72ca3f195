"""Domain layer - core business models and ports."""

from metro_stay.domain.models import (
    Candidate,
    Line,
    RankingMode,
    RouteResult,
    ScoredResult,
    SearchRequest,
    Station,
    StationGroup,
    TransitNetwork,
)
from metro_stay.domain.ports import (
    FareProvider,
    LodgingProvider,
    TimetableProvider,
    TopologyProvider,
    TrainScheduleProvider,
    WalkingTimeProvider,
)

__all__ = [
    "Candidate",
    "FareProvider",
    "Line",
    "LodgingProvider",
    "RankingMode",
    "RouteResult",
    "ScoredResult",
    "SearchRequest",
    "Station",
    "StationGroup",
    "TimetableProvider",
    "TopologyProvider",
    "TrainScheduleProvider",
    "TransitNetwork",
    "WalkingTimeProvider",
]
