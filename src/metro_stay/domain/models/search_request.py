"""Search request domain model."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SearchRequest(BaseModel):
    """Parameters of one lodging search around a destination station."""

    model_config = ConfigDict(frozen=True)

    destination_name: str = Field(min_length=1)
    check_in: date
    check_out: date
    guest_count: int = Field(default=2, ge=1)
    room_count: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def validate_stay_dates(self) -> "SearchRequest":
        """Reject a check-out date before the check-in date."""
        if self.check_out < self.check_in:
            raise ValueError("check_out must not be before check_in")
        return self

    @property
    def night_count(self) -> int:
        """Number of nights, never less than one."""
        return max(1, (self.check_out - self.check_in).days)
