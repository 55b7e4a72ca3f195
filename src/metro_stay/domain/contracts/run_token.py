"""Protocol for search run supersession."""

from typing import Protocol


class RunTokenProtocol(Protocol):
    """Caller-owned handle telling a search run whether it is still current."""

    def is_current(self) -> bool:
        """Return False once a newer run has superseded this one."""
        ...
