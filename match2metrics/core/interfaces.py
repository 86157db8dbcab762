"""
Core value objects and abstract interfaces for match-log analytics.

This module defines the records produced by the text parsers, the derived
per-model comparison rows, and the abstract parser interface that the
concrete match-log and rating-summary parsers implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Verdict(str, Enum):
    """Qualitative comparison of a model's rating against the baseline."""
    STRONGER = "Stronger than baseline"
    WEAKER = "Weaker than baseline"
    EQUAL = "Equal"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ModelMatchStats:
    """Timing and resource statistics for one model from a match log."""

    avg_move_time: float
    sample_move_count: int
    nn_row_count: int = 0


@dataclass(frozen=True)
class ModelRatingStats:
    """Rating statistics for one model from a tournament summary."""

    rating: Optional[float] = None
    rating_error: Optional[float] = None
    win_percent: Optional[float] = None


@dataclass(frozen=True)
class DerivedRow:
    """Per-model record combining raw stats with comparative metrics."""

    model: str
    baseline: Optional[str]
    avg_time: Optional[float]
    moves: Optional[int]
    nn_rows: Optional[int]
    win_percent: Optional[float]
    elo: Optional[float]
    elo_error: Optional[float]
    relative_speed: Optional[float]
    elo_per_row: Optional[float]
    efficiency: Optional[float]
    verdict: Verdict

    def as_dict(self) -> Dict[str, Any]:
        """Return the row keyed by its output field names."""
        return {
            "model": self.model,
            "baseline": self.baseline,
            "avgTime": self.avg_time,
            "moves": self.moves,
            "nnRows": self.nn_rows,
            "winPercent": self.win_percent,
            "elo": self.elo,
            "error": self.elo_error,
            "relativeSpeed": self.relative_speed,
            "eloPerRow": self.elo_per_row,
            "efficiency": self.efficiency,
            "verdict": self.verdict.value,
        }


@dataclass(frozen=True)
class DerivationResult:
    """Resolved baseline plus the derived rows for one run."""

    baseline: Optional[str]
    rows: Tuple[DerivedRow, ...] = ()

    def __str__(self) -> str:
        return f"baseline={self.baseline}, rows={len(self.rows)}"


@dataclass(frozen=True)
class Run:
    """A labelled, completed derivation kept in the run history."""

    label: str
    rows: Tuple[DerivedRow, ...] = ()

    def row_for(self, model: str) -> Optional[DerivedRow]:
        """Return the first row for ``model`` in this run, if any."""
        for row in self.rows:
            if row.model == model:
                return row
        return None


class TextParser(ABC):
    """Abstract base class for free-text log parsers."""

    @abstractmethod
    def parse(self, text: Optional[str]) -> Dict[str, Any]:
        """
        Extract per-model records from raw text.

        Args:
            text: Raw log text; ``None`` or empty text yields an empty mapping

        Returns:
            Mapping from model name to record, in order of first appearance
        """
        pass
