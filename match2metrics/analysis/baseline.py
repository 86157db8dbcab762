"""
Baseline model selection.
"""

from typing import Mapping, Optional

from ..core.interfaces import ModelMatchStats, ModelRatingStats


class BaselineSelector:
    """Picks the reference model that all comparisons are made against."""

    def select(self,
               ratings: Mapping[str, ModelRatingStats],
               match_stats: Mapping[str, ModelMatchStats],
               explicit: Optional[str] = None) -> Optional[str]:
        """
        Resolve the baseline model name.

        Priority: the explicit name when given, else the highest-rated model
        (first encountered wins ties), else the first model of the match
        stats, else ``None``.

        Args:
            ratings: Parsed rating summary records
            match_stats: Parsed match log records
            explicit: Caller-supplied baseline name

        Returns:
            Baseline model name or None when no model exists
        """
        if explicit:
            return explicit

        best_name = None
        best_rating = None
        for name, stats in ratings.items():
            if stats.rating is None:
                continue
            if best_rating is None or stats.rating > best_rating:
                best_name, best_rating = name, stats.rating
        if best_name is not None:
            return best_name

        return next(iter(match_stats), None)
