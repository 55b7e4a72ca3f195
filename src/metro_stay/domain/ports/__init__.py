"""Ports (interfaces) for the ports-and-adapters architecture."""

from metro_stay.domain.ports.fare_provider import FareProvider
from metro_stay.domain.ports.lodging_provider import LodgingProvider
from metro_stay.domain.ports.timetable_provider import TimetableProvider
from metro_stay.domain.ports.topology_provider import TopologyProvider
from metro_stay.domain.ports.train_schedule_provider import TrainScheduleProvider
from metro_stay.domain.ports.walking_time_provider import WalkingTimeProvider

__all__ = [
    "FareProvider",
    "LodgingProvider",
    "TimetableProvider",
    "TopologyProvider",
    "TrainScheduleProvider",
    "WalkingTimeProvider",
]
