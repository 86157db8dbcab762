"""
Run history aggregation for multi-run trend analysis.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd

from ..core.interfaces import DerivedRow, Run

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ["run", "model", "winPercent", "elo", "error", "avgTime", "nnRows", "efficiency"]


class RunHistoryAggregator:
    """
    Append-only sequence of completed runs.

    Labels are opaque and may repeat; every appended run is kept and
    addressed by its position, never by its label.
    """

    def __init__(self):
        self._runs: List[Run] = []

    def append(self, label: str, rows: Iterable[DerivedRow]) -> Run:
        """Append a completed run and return it."""
        run = Run(label=label, rows=tuple(rows))
        self._runs.append(run)
        logger.debug(f"Appended run {label!r} with {len(run.rows)} rows")
        return run

    @property
    def runs(self) -> Tuple[Run, ...]:
        return tuple(self._runs)

    @property
    def labels(self) -> List[str]:
        return [run.label for run in self._runs]

    def __len__(self) -> int:
        return len(self._runs)

    def __iter__(self) -> Iterator[Run]:
        return iter(tuple(self._runs))

    def tracked_models(self) -> List[str]:
        """Models seen in any row that is not its own baseline, by first appearance."""
        models: List[str] = []
        for run in self._runs:
            for row in run.rows:
                if row.model != row.baseline and row.model not in models:
                    models.append(row.model)
        return models

    def rating_series(self, model: str) -> List[Optional[float]]:
        """
        Rating of ``model`` in every run, in append order.

        Runs where the model is absent (or unrated) contribute ``None``.
        """
        series = []
        for run in self._runs:
            row = run.row_for(model)
            series.append(row.elo if row is not None else None)
        return series

    def rating_trend(self) -> pd.DataFrame:
        """
        One row per run, one column per tracked model; NaN where missing.

        Run labels form the index (named ``run``) so that no model name can
        collide with them.
        """
        data = {}
        for model in self.tracked_models():
            data[model] = [np.nan if value is None else value for value in self.rating_series(model)]
        return pd.DataFrame(data, index=pd.Index(self.labels, name="run"))

    def to_frame(self) -> pd.DataFrame:
        """Long history table with one row per (run, derived row)."""
        records = []
        for run in self._runs:
            for row in run.rows:
                records.append({
                    "run": run.label,
                    "model": row.model,
                    "winPercent": row.win_percent,
                    "elo": row.elo,
                    "error": row.elo_error,
                    "avgTime": row.avg_time,
                    "nnRows": row.nn_rows,
                    "efficiency": row.efficiency,
                })
        return pd.DataFrame(records, columns=HISTORY_COLUMNS)
