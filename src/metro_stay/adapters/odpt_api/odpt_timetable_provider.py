"""ODPT timetable sample provider adapter."""

import logging

from metro_stay.adapters.odpt_api.constants import (
    CALENDAR_WEEKDAY,
    MAX_SAMPLED_TRAINS,
    TRAIN_TIMETABLE,
)
from metro_stay.adapters.odpt_api.http_client import OdptHttpClient
from metro_stay.adapters.odpt_api.parsers import parse_train_segments
from metro_stay.domain.models.line import Line
from metro_stay.domain.models.timetable_segment import TimetableSegment
from metro_stay.domain.ports.timetable_provider import TimetableProvider

logger = logging.getLogger(__name__)


class OdptTimetableProvider(TimetableProvider):
    """Samples weekday train timetables for inter-station durations."""

    def __init__(self, http_client: OdptHttpClient, max_trains: int = MAX_SAMPLED_TRAINS) -> None:
        """Initialize with an ODPT client and the number of trains to analyse."""
        self._http_client = http_client
        self._max_trains = max_trains
        self._cache: dict[str, list[TimetableSegment]] = {}

    async def sample_segments(self, line: Line) -> list[TimetableSegment]:
        """Fetch and cache sampled segments of a line."""
        if line.id in self._cache:
            return self._cache[line.id]

        timetables = await self._http_client.get_resources(
            TRAIN_TIMETABLE, {"odpt:railway": line.id, "odpt:calendar": CALENDAR_WEEKDAY}
        )
        segments = parse_train_segments(timetables, self._max_trains)
        if segments:
            self._cache[line.id] = segments
        logger.debug(f"{line.name}: sampled {len(segments)} segment(s)")
        return segments
