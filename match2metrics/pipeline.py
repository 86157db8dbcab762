"""
Single-run and multi-run analysis pipelines.

Each run's text goes through the match-log and rating-summary parsers
independently, then the metrics deriver merges both outputs. Multi-run
analysis processes runs one at a time in caller order and appends each
completed derivation to a run history.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Optional
import logging

from .analysis.history import RunHistoryAggregator
from .analysis.metrics import MetricsDeriver
from .core.interfaces import DerivationResult, ModelMatchStats, ModelRatingStats
from .data.loaders import RunText
from .processors.match_log import MatchLogParser
from .processors.rating_summary import RatingSummaryParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunAnalysis:
    """Parsed inputs and derived rows for one run."""

    match_stats: Dict[str, ModelMatchStats] = field(default_factory=dict)
    ratings: Dict[str, ModelRatingStats] = field(default_factory=dict)
    derived: DerivationResult = field(default_factory=lambda: DerivationResult(baseline=None))

    @property
    def has_models(self) -> bool:
        """False when neither source yielded a parseable model."""
        return bool(self.match_stats or self.ratings)


def analyze_run(match_text: Optional[str] = None,
                summary_text: Optional[str] = None,
                baseline: Optional[str] = None) -> RunAnalysis:
    """
    Parse and derive one run.

    Args:
        match_text: Raw match log text, may be None
        summary_text: Raw rating summary text, may be None
        baseline: Optional explicit baseline model

    Returns:
        RunAnalysis for the run
    """
    match_text = match_text.strip() if match_text else ""
    summary_text = summary_text.strip() if summary_text else ""

    match_stats = MatchLogParser().parse(match_text)
    ratings = RatingSummaryParser().parse(summary_text)
    derived = MetricsDeriver().derive(match_stats, ratings, baseline)

    return RunAnalysis(match_stats=match_stats, ratings=ratings, derived=derived)


def analyze_runs(run_ids: Iterable[str],
                 fetch: Callable[[str], RunText],
                 aggregator: Optional[RunHistoryAggregator] = None,
                 baseline: Optional[str] = None) -> RunHistoryAggregator:
    """
    Analyze runs sequentially and append each to a run history.

    A run whose text could not be obtained (including a fetch that raises),
    or which yields no model, is skipped without affecting later runs.

    Args:
        run_ids: Run identifiers in processing order, also used as labels
        fetch: Callable returning the RunText for a run identifier
        aggregator: History to append to; a new one is created if omitted
        baseline: Optional explicit baseline model for every run

    Returns:
        The aggregator holding all completed runs
    """
    history = aggregator if aggregator is not None else RunHistoryAggregator()

    for run_id in run_ids:
        try:
            run_text = fetch(run_id)
        except Exception as e:
            logger.warning(f"Skipping run {run_id}: failed to retrieve text: {e}")
            continue

        if run_text is None or run_text.is_empty:
            logger.warning(f"Skipping run {run_id}: no match log or summary text")
            continue

        analysis = analyze_run(run_text.match_text, run_text.summary_text, baseline)
        if not analysis.has_models:
            logger.warning(f"Skipping run {run_id}: no models found")
            continue

        history.append(run_id, analysis.derived.rows)
        logger.info(f"Processed run {run_id}: {len(analysis.derived.rows)} models, "
                    f"baseline={analysis.derived.baseline}")

    return history
