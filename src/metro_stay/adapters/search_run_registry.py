"""Run tokens letting a newer search supersede an older one."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchRunToken:
    """Token of one search run, current until the registry starts another."""

    registry: "SearchRunRegistry"
    generation: int

    def is_current(self) -> bool:
        """Whether no newer run has been started."""
        return self.registry.generation == self.generation


class SearchRunRegistry:
    """Issues run tokens; starting a run supersedes all earlier ones."""

    def __init__(self) -> None:
        """Initialize with no run started."""
        self.generation = 0

    def start_run(self) -> SearchRunToken:
        """Start a new run and return its token."""
        self.generation += 1
        return SearchRunToken(registry=self, generation=self.generation)
