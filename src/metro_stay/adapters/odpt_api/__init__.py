"""ODPT open-data adapters for topology, timetables, fares and schedules."""

from metro_stay.adapters.odpt_api.http_client import OdptHttpClient
from metro_stay.adapters.odpt_api.odpt_fare_provider import OdptFareProvider
from metro_stay.adapters.odpt_api.odpt_timetable_provider import OdptTimetableProvider
from metro_stay.adapters.odpt_api.odpt_topology_provider import OdptTopologyProvider
from metro_stay.adapters.odpt_api.odpt_train_schedule_provider import (
    OdptTrainScheduleProvider,
)

__all__ = [
    "OdptFareProvider",
    "OdptHttpClient",
    "OdptTimetableProvider",
    "OdptTopologyProvider",
    "OdptTrainScheduleProvider",
]
