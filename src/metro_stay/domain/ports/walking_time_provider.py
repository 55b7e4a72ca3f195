"""Walking time provider port."""

from typing import Protocol


class WalkingTimeProvider(Protocol):
    """Port for estimating pedestrian travel time between two positions."""

    async def walk_minutes(
        self, from_latitude: float, from_longitude: float, to_latitude: float, to_longitude: float
    ) -> int | None:
        """Walking minutes between two positions, or None when unknown."""
        ...
