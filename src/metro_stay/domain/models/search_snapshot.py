"""Search snapshot domain model."""

from dataclasses import dataclass

from metro_stay.domain.models.ranking_mode import RankingMode
from metro_stay.domain.models.scored_result import ScoredResult


@dataclass(frozen=True)
class SearchSnapshot:
    """The authoritative ranked result list at one point of a search run."""

    results: list[ScoredResult]
    mode: RankingMode
    processed_groups: int
    total_groups: int
    is_final: bool = False

    @property
    def progress_percent(self) -> int:
        """Share of station groups processed so far."""
        if self.total_groups == 0:
            return 100
        return round(self.processed_groups / self.total_groups * 100)
