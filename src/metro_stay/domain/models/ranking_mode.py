"""Ranking mode domain model."""

from enum import StrEnum


class RankingMode(StrEnum):
    """Scoring philosophy used to order results."""

    PRICE = "price"
    RATING = "rating"
    COSPA = "cospa"
