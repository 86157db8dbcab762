"""
Match2Metrics: analytics for engine-vs-engine match runs.

This package provides tools for extracting per-model timing and rating
records from match logs and tournament summaries, comparing every model
against a baseline, and tracking ratings across runs.
"""

__version__ = "0.1.0"
__author__ = "Match2Metrics Team"

from .core.interfaces import (
    ModelMatchStats, ModelRatingStats, DerivedRow, DerivationResult, Run, Verdict
)
from .processors.match_log import MatchLogParser
from .processors.rating_summary import RatingSummaryParser
from .analysis.baseline import BaselineSelector
from .analysis.metrics import MetricsDeriver
from .analysis.history import RunHistoryAggregator
from .pipeline import RunAnalysis, analyze_run, analyze_runs

__all__ = [
    "ModelMatchStats",
    "ModelRatingStats",
    "DerivedRow",
    "DerivationResult",
    "Run",
    "Verdict",
    "MatchLogParser",
    "RatingSummaryParser",
    "BaselineSelector",
    "MetricsDeriver",
    "RunHistoryAggregator",
    "RunAnalysis",
    "analyze_run",
    "analyze_runs",
]
