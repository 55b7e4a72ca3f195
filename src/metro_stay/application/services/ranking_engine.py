"""Scoring and ranking of aggregated results."""

import logging
import math
from dataclasses import replace

from metro_stay.application.services.baseline_selector import (
    select_baseline,
    select_cospa_baseline,
)
from metro_stay.domain.models.ranking_mode import RankingMode
from metro_stay.domain.models.scored_result import ScoredResult

logger = logging.getLogger(__name__)


def _reset(result: ScoredResult) -> ScoredResult:
    return replace(
        result, savings=None, saved_money=0, extra_time=0, cospa_index=0, is_baseline=False
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def annotate_results(
    results: list[ScoredResult], mode: RankingMode, destination_name: str
) -> list[ScoredResult]:
    """Compute the mode-specific annotations without changing the order.

    Every call returns fresh records; annotations left over from a previous
    mode are never carried over.
    """
    fresh = [_reset(result) for result in results]
    baseline = select_baseline(fresh, destination_name)
    if baseline is None:
        return fresh

    if mode == RankingMode.COSPA:
        return _annotate_cospa(fresh, baseline)

    if mode == RankingMode.RATING:
        baseline_rating = baseline.candidate.rating_or_zero
        return [
            replace(
                result,
                savings=result.candidate.rating_or_zero - baseline_rating,
                is_baseline=result.result_id == baseline.result_id,
            )
            for result in fresh
        ]

    return [
        replace(
            result,
            savings=baseline.total_cost - result.total_cost,
            is_baseline=result.result_id == baseline.result_id,
        )
        for result in fresh
    ]


def _annotate_cospa(results: list[ScoredResult], baseline: ScoredResult) -> list[ScoredResult]:
    cospa_baseline = select_cospa_baseline(results, baseline.station_name) or baseline
    baseline_cost = cospa_baseline.price_with_round_trip_fare
    baseline_time = cospa_baseline.travel_time

    annotated = []
    for result in results:
        is_baseline = result.result_id == cospa_baseline.result_id
        travel_time = result.travel_time
        if not is_baseline and travel_time == baseline_time:
            # Same travel time as the baseline counts as one extra minute
            travel_time += 1

        saved_money = baseline_cost - result.price_with_round_trip_fare
        extra_time = travel_time - baseline_time
        cospa_index = _round_half_up(saved_money / extra_time) if extra_time > 0 else 0

        annotated.append(
            replace(
                result,
                saved_money=saved_money,
                extra_time=extra_time,
                cospa_index=cospa_index,
                is_baseline=is_baseline,
            )
        )
    return annotated


def _cospa_sort_key(result: ScoredResult) -> tuple[int, int, int, int]:
    if result.is_baseline:
        return (0, 0, 0, 0)
    if result.extra_time <= 0:
        # No defined index: order among these by money saved
        return (1, -result.cospa_index, 0, -result.saved_money)
    return (1, -result.cospa_index, 1, 0)


def rank_results(
    results: list[ScoredResult], mode: RankingMode, destination_name: str
) -> list[ScoredResult]:
    """Annotate and sort results for a ranking mode.

    - price: ascending total cost.
    - rating: descending rating, a missing rating counting as 0.
    - cospa: baseline first, then descending cost-performance index.

    Args:
        results: Aggregated results, in any order.
        mode: Ranking mode.
        destination_name: Display name of the destination station group.

    Returns:
        Freshly annotated results in ranking order.
    """
    annotated = annotate_results(results, mode, destination_name)

    if mode == RankingMode.RATING:
        return sorted(annotated, key=lambda result: -result.candidate.rating_or_zero)

    if mode == RankingMode.COSPA and any(result.is_baseline for result in annotated):
        return sorted(annotated, key=_cospa_sort_key)

    return sorted(annotated, key=lambda result: result.total_cost)
