"""Train schedule provider port."""

from datetime import date
from typing import Protocol

from metro_stay.domain.models.train_schedule import FirstLastTrains


class TrainScheduleProvider(Protocol):
    """Port for looking up the last and first trains of a stay."""

    async def first_last_trains(
        self,
        destination_station_id: str,
        hotel_station_id: str,
        direction_to_hotel: str,
        direction_to_destination: str,
        travel_date: date,
        travel_minutes: int,
    ) -> FirstLastTrains:
        """Last train from the destination and first train back the next day."""
        ...
