"""Result sink that logs progress and keeps the latest snapshot."""

import logging

from metro_stay.domain.contracts.result_sink import ResultSinkProtocol
from metro_stay.domain.models.search_snapshot import SearchSnapshot

logger = logging.getLogger(__name__)


class LoggingResultSink(ResultSinkProtocol):
    """Keeps the most recent snapshot and logs search progress."""

    def __init__(self) -> None:
        """Initialize without a snapshot."""
        self.latest: SearchSnapshot | None = None

    async def publish(self, snapshot: SearchSnapshot) -> None:
        """Replace the latest snapshot and log progress."""
        self.latest = snapshot
        if snapshot.is_final:
            logger.info(f"Search complete: {len(snapshot.results)} result(s)")
        else:
            logger.info(
                f"Searching nearby stations... ({snapshot.processed_groups}/"
                f"{snapshot.total_groups}, {len(snapshot.results)} result(s))"
            )
