"""Adapters layer - external system integrations."""

from metro_stay.adapters.config import AppConfig, LineConfigurationLoader
from metro_stay.adapters.odpt_api import (
    OdptFareProvider,
    OdptHttpClient,
    OdptTimetableProvider,
    OdptTopologyProvider,
    OdptTrainScheduleProvider,
)
from metro_stay.adapters.osrm_api import OsrmWalkingTimeProvider
from metro_stay.adapters.rakuten_api import RakutenLodgingProvider

__all__ = [
    "AppConfig",
    "LineConfigurationLoader",
    "OdptFareProvider",
    "OdptHttpClient",
    "OdptTimetableProvider",
    "OdptTopologyProvider",
    "OdptTrainScheduleProvider",
    "OsrmWalkingTimeProvider",
    "RakutenLodgingProvider",
]
