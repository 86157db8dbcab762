"""Free-text parsers for match logs and rating summaries."""

from .match_log import MatchLogParser
from .rating_summary import RatingSummaryParser

__all__ = ["MatchLogParser", "RatingSummaryParser"]
