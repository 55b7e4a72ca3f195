"""Protocol for receiving search snapshots."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from metro_stay.domain.models.search_snapshot import SearchSnapshot


class ResultSinkProtocol(Protocol):
    """Receives ranked result snapshots while a search progresses."""

    async def publish(self, snapshot: "SearchSnapshot") -> None:
        """Publish a snapshot, replacing any previously published one.

        Args:
            snapshot: The complete current result list and progress.
        """
        ...
