"""Baseline selection for relative scoring."""

from metro_stay.domain.models.scored_result import ScoredResult


def _cheapest(results: list[ScoredResult]) -> ScoredResult:
    return min(results, key=lambda result: result.total_cost)


def select_baseline(results: list[ScoredResult], destination_name: str) -> ScoredResult | None:
    """Pick the reference result that relative metrics are measured against.

    The cheapest result at the destination wins. Without any result at the
    destination, the cheapest result of the group with the shortest minimum
    train time is used instead.

    Args:
        results: Current results of a scoring pass.
        destination_name: Display name of the destination station group.

    Returns:
        The baseline result, or None when there are no results.
    """
    by_group: dict[str, list[ScoredResult]] = {}
    for result in results:
        by_group.setdefault(result.station_name, []).append(result)

    destination_results = by_group.get(destination_name)
    if destination_results:
        return _cheapest(destination_results)

    nearest_first = sorted(
        by_group.values(), key=lambda members: min(member.train_time for member in members)
    )
    for members in nearest_first:
        if members:
            return _cheapest(members)
    return None


def select_cospa_baseline(results: list[ScoredResult], station_name: str) -> ScoredResult | None:
    """Pick the quickest-to-reach result within a station group.

    Ties on travel time go to the lower lodging price, then to the earlier
    result.
    """
    same_station = [result for result in results if result.station_name == station_name]
    if not same_station:
        return None
    return min(same_station, key=lambda result: (result.travel_time, result.candidate.price))
