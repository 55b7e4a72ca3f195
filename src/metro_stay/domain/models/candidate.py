"""Lodging candidate domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """A lodging offer for the requested stay.

    ``price`` is the total price for the whole stay as quoted by the provider.
    """

    id: str
    name: str
    price: int
    rating: float | None = None
    latitude: float | None = None
    longitude: float | None = None
    url: str | None = None
    image_url: str | None = None
    room_image_url: str | None = None
    room_thumbnail_url: str | None = None

    @property
    def rating_or_zero(self) -> float:
        """Rating used for ordering, with a missing rating counted as 0."""
        return self.rating if self.rating is not None else 0.0
