"""Line configuration loader."""

import logging
from typing import Any

from metro_stay.adapters.config.app_config import AppConfig
from metro_stay.adapters.odpt_api.constants import TOKYO_METRO_LINES
from metro_stay.domain.models.line import Line

logger = logging.getLogger(__name__)


class LineConfigurationLoader:
    """Loads rail line declarations from app config."""

    @staticmethod
    def load_line_from_data(line_data: dict[str, Any]) -> Line | None:
        """Load a single line from a [[lines]] table."""
        line_id = line_data.get("id")
        if not line_id or not isinstance(line_id, str):
            return None

        name = line_data.get("name", line_id)
        if not isinstance(name, str):
            name = line_id

        return Line(
            id=line_id,
            name=name,
            color=str(line_data.get("color", "")),
            reference_station_id=str(line_data.get("reference_station_id", "")),
            direction_ascending=str(line_data.get("direction_ascending", "")),
            direction_descending=str(line_data.get("direction_descending", "")),
        )

    @staticmethod
    def load(config: AppConfig) -> list[Line]:
        """Load configured lines, or the built-in Tokyo Metro lines when none are declared."""
        lines: list[Line] = []
        seen: set[str] = set()
        for line_data in config.get_lines_config():
            line = LineConfigurationLoader.load_line_from_data(line_data)
            if line is None:
                logger.warning(f"Ignoring line entry without id: {line_data}")
                continue
            if line.id in seen:
                continue
            seen.add(line.id)
            lines.append(line)

        if not lines:
            return list(TOKYO_METRO_LINES)
        return lines
