"""ODPT first/last train provider adapter."""

import logging
from datetime import date, timedelta

from metro_stay.adapters.odpt_api.constants import (
    CALENDAR_SATURDAY_HOLIDAY,
    CALENDAR_WEEKDAY,
    STATION_TIMETABLE,
)
from metro_stay.adapters.odpt_api.http_client import OdptHttpClient
from metro_stay.adapters.odpt_api.parsers import parse_station_departures
from metro_stay.domain.models.timetable_segment import MINUTES_PER_DAY, parse_clock_minutes
from metro_stay.domain.models.train_schedule import FirstLastTrains, TrainInfo
from metro_stay.domain.ports.train_schedule_provider import TrainScheduleProvider

logger = logging.getLogger(__name__)


def calendar_for(travel_date: date) -> str:
    """ODPT calendar that applies on a date (weekends use the holiday timetable)."""
    return CALENDAR_SATURDAY_HOLIDAY if travel_date.weekday() >= 5 else CALENDAR_WEEKDAY


def arrival_time(departure_time: str, travel_minutes: int) -> str:
    """Departure plus travel minutes, wrapped at midnight, as "HH:MM"."""
    total = (parse_clock_minutes(departure_time) + travel_minutes) % MINUTES_PER_DAY
    return f"{total // 60:02d}:{total % 60:02d}"


class OdptTrainScheduleProvider(TrainScheduleProvider):
    """Looks up last and first trains from ODPT station timetables."""

    def __init__(self, http_client: OdptHttpClient) -> None:
        """Initialize with an ODPT client."""
        self._http_client = http_client
        self._cache: dict[tuple[str, str, str], list[tuple[str, str]]] = {}

    async def station_departures(
        self, station_id: str, direction: str, calendar: str
    ) -> list[tuple[str, str]]:
        """Departures of a station towards a direction, cached per calendar."""
        key = (station_id, direction, calendar)
        if key in self._cache:
            return self._cache[key]

        data = await self._http_client.get_resources(
            STATION_TIMETABLE,
            {
                "odpt:station": station_id,
                "odpt:railDirection": direction,
                "odpt:calendar": calendar,
            },
        )
        departures = parse_station_departures(data)
        if departures:
            self._cache[key] = departures
        else:
            logger.debug(f"Empty station timetable for {station_id} towards {direction}")
        return departures

    async def first_last_trains(
        self,
        destination_station_id: str,
        hotel_station_id: str,
        direction_to_hotel: str,
        direction_to_destination: str,
        travel_date: date,
        travel_minutes: int,
    ) -> FirstLastTrains:
        """Last train from the destination today and first train back tomorrow."""
        last_departures = await self.station_departures(
            destination_station_id, direction_to_hotel, calendar_for(travel_date)
        )
        first_departures = await self.station_departures(
            hotel_station_id,
            direction_to_destination,
            calendar_for(travel_date + timedelta(days=1)),
        )

        last_train = None
        if last_departures:
            departure, destination = last_departures[-1]
            last_train = TrainInfo(departure, arrival_time(departure, travel_minutes), destination)

        first_train = None
        if first_departures:
            departure, destination = first_departures[0]
            first_train = TrainInfo(departure, arrival_time(departure, travel_minutes), destination)

        return FirstLastTrains(last_train=last_train, first_train=first_train)
