"""
Derived comparison metrics.

Merges match-log and rating-summary records by model name and computes the
relative speed, rating per neural-net row, rating efficiency and verdict of
every model against the baseline. Any metric whose operand is missing or
zero is ``None``.
"""

import logging
from typing import Mapping, Optional

from ..core.interfaces import (
    DerivationResult, DerivedRow, ModelMatchStats, ModelRatingStats, Verdict
)
from .baseline import BaselineSelector

logger = logging.getLogger(__name__)


def _ratio(numerator: Optional[float], denominator: Optional[float]) -> Optional[float]:
    """Divide when both operands are present and the denominator is non-zero."""
    if numerator is None or not denominator:
        return None
    return numerator / denominator


def compare_ratings(rating: Optional[float], baseline_rating: Optional[float]) -> Verdict:
    """
    Compare a model's rating to the baseline's.

    A missing baseline rating compares as 0; a missing model rating is Unknown.
    """
    if rating is None:
        return Verdict.UNKNOWN
    reference = baseline_rating if baseline_rating is not None else 0.0
    if rating > reference:
        return Verdict.STRONGER
    if rating < reference:
        return Verdict.WEAKER
    return Verdict.EQUAL


class MetricsDeriver:
    """Builds DerivedRow sets from the two parsers' outputs."""

    def __init__(self, selector: Optional[BaselineSelector] = None):
        self.selector = selector or BaselineSelector()

    def derive(self,
               match_stats: Mapping[str, ModelMatchStats],
               ratings: Mapping[str, ModelRatingStats],
               baseline: Optional[str] = None) -> DerivationResult:
        """
        Derive comparison rows for every model in the match stats.

        Models that only appear in the ratings produce no row. Row order
        follows the iteration order of ``match_stats``.

        Args:
            match_stats: Parsed match log records
            ratings: Parsed rating summary records
            baseline: Optional explicit baseline name

        Returns:
            DerivationResult with the resolved baseline and ordered rows
        """
        resolved = self.selector.select(ratings, match_stats, baseline)

        baseline_stats = match_stats.get(resolved) if resolved is not None else None
        baseline_time = baseline_stats.avg_move_time if baseline_stats else None
        if not baseline_time:
            baseline_time = None

        baseline_ratings = ratings.get(resolved) if resolved is not None else None
        baseline_rating = baseline_ratings.rating if baseline_ratings else None

        rows = []
        for model, stats in match_stats.items():
            rating_stats = ratings.get(model) or ModelRatingStats()
            elo = rating_stats.rating

            rows.append(DerivedRow(
                model=model,
                baseline=resolved,
                avg_time=stats.avg_move_time,
                moves=stats.sample_move_count,
                nn_rows=stats.nn_row_count,
                win_percent=rating_stats.win_percent,
                elo=elo,
                elo_error=rating_stats.rating_error,
                relative_speed=_ratio(baseline_time, stats.avg_move_time),
                elo_per_row=_ratio(elo, stats.nn_row_count),
                efficiency=_ratio(elo, stats.avg_move_time),
                verdict=compare_ratings(elo, baseline_rating),
            ))

        result = DerivationResult(baseline=resolved, rows=tuple(rows))
        logger.debug(f"Derived metrics: {result}")
        return result
