"""Timetable sample provider port."""

from typing import Protocol

from metro_stay.domain.models.line import Line
from metro_stay.domain.models.timetable_segment import TimetableSegment


class TimetableProvider(Protocol):
    """Port for retrieving sampled inter-station segments of a line.

    Best effort: implementations return an empty list on failure.
    """

    async def sample_segments(self, line: Line) -> list[TimetableSegment]:
        """Get sampled consecutive-stop segments for a line."""
        ...
