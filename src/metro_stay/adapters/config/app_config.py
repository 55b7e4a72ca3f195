"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from metro_stay.domain.models.ranking_mode import RankingMode

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# TOML [search] and [api] keys that override the matching fields
_TOML_SECTION_FIELDS: dict[str, tuple[str, ...]] = {
    "search": (
        "max_candidates_per_station",
        "walking_batch_size",
        "max_transfers",
        "transfer_penalty_minutes",
        "default_edge_minutes",
        "fallback_fare",
        "max_sampled_trains",
        "default_ranking_mode",
        "lodging_search_radius_km",
    ),
    "api": (
        "api_timeout_seconds",
        "odpt_min_delay_seconds",
        "lodging_min_delay_seconds",
    ),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Credentials
    odpt_api_key: str = Field(default="", description="ODPT consumer key")
    rakuten_app_id: str = Field(default="", description="Rakuten Web Service application id")

    # API configuration
    api_timeout_seconds: float = Field(
        default=10, gt=0, description="Timeout for outgoing API requests in seconds"
    )
    odpt_min_delay_seconds: float = Field(
        default=0.2, ge=0, description="Minimum delay between ODPT API requests"
    )
    lodging_min_delay_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Delay between lodging queries of successive station groups",
    )

    # Search configuration
    lodging_search_radius_km: float = Field(
        default=1.0, gt=0, le=3.0, description="Lodging search radius around a station"
    )
    max_candidates_per_station: int = Field(
        default=5, ge=1, description="Offers aggregated per station group in price/cospa mode"
    )
    walking_batch_size: int = Field(
        default=3, ge=1, description="Concurrent walking-time lookups per batch"
    )
    max_transfers: int = Field(default=1, description="Transfer budget of the route search")
    transfer_penalty_minutes: int = Field(
        default=5, ge=0, description="Minutes added for each transfer"
    )
    default_edge_minutes: int = Field(
        default=2, ge=1, description="Travel minutes assumed between adjacent stations"
    )
    fallback_fare: int = Field(
        default=200, ge=0, description="Fare in yen used when no fare is known"
    )
    max_sampled_trains: int = Field(
        default=20, ge=1, description="Train runs analysed per line when sampling durations"
    )
    default_ranking_mode: RankingMode = Field(
        default=RankingMode.COSPA, description="Ranking mode used when none is requested"
    )

    log_level: str = Field(default="INFO", description="Root logging level")

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [[lines]] and search settings",
    )

    @field_validator("max_transfers")
    @classmethod
    def validate_max_transfers(cls, v: int) -> int:
        """Validate the transfer budget is 0 or 1."""
        if v not in (0, 1):
            raise ValueError("max_transfers must be either 0 or 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, updating search and API settings.

        Returns an empty dict when no config file is set.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section, fields in _TOML_SECTION_FIELDS.items():
            values = toml_data.get(section, {})
            if not isinstance(values, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            for field in fields:
                if field in values:
                    setattr(self, field, values[field])

        return toml_data

    def get_lines_config(self) -> list[dict[str, Any]]:
        """Parse and return the [[lines]] tables of the TOML file.

        Returns an empty list when no config file is set or it declares no lines.
        """
        toml_data = self._load_toml_data()

        lines = toml_data.get("lines", [])
        if not isinstance(lines, list):
            raise ValueError("TOML config 'lines' must be a list")
        return [line for line in lines if isinstance(line, dict)]
