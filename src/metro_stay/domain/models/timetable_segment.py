"""Timetable segment domain model."""

from dataclasses import dataclass

MINUTES_PER_DAY = 24 * 60


def parse_clock_minutes(clock: str) -> int:
    """Convert an "HH:MM" wall-clock string into minutes after midnight."""
    hours, minutes = clock.split(":")[:2]
    return int(hours) * 60 + int(minutes)


@dataclass(frozen=True)
class TimetableSegment:
    """One sampled hop of a train run between two consecutive stops."""

    from_station_id: str
    to_station_id: str
    departure_time: str  # "HH:MM" at from_station_id
    arrival_time: str  # "HH:MM" at to_station_id

    @property
    def minutes(self) -> int:
        """Wall-clock duration of the hop, wrapped past midnight."""
        diff = parse_clock_minutes(self.arrival_time) - parse_clock_minutes(self.departure_time)
        if diff < 0:
            diff += MINUTES_PER_DAY
        return diff
