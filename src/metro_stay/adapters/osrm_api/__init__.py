"""OSRM walking time adapter."""

from metro_stay.adapters.osrm_api.osrm_walking_time_provider import OsrmWalkingTimeProvider

__all__ = ["OsrmWalkingTimeProvider"]
