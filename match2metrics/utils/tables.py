"""
Tabular views of parsed and derived data.

The ``*_frame`` helpers return raw numeric DataFrames for export; the
``format_*`` helpers return display tables of strings where every missing
value renders as ``"-"``.
"""

from typing import Callable, Iterable, Mapping, Optional

import pandas as pd

from ..analysis.history import RunHistoryAggregator
from ..core.interfaces import DerivedRow, ModelMatchStats, ModelRatingStats

PLACEHOLDER = "-"

DERIVED_COLUMNS = [
    "model", "baseline", "avgTime", "moves", "nnRows", "winPercent", "elo",
    "error", "relativeSpeed", "eloPerRow", "efficiency", "verdict",
]


def format_value(value, formatter: Callable[[float], str]) -> str:
    """Format a value, rendering None/NaN as the placeholder."""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return PLACEHOLDER
    return formatter(value)


def _fixed(decimals: int) -> Callable[[float], str]:
    return lambda v: f"{v:.{decimals}f}"


def _thousands(v) -> str:
    return f"{int(v):,}"


def _percent(v) -> str:
    return f"{v:.1f}%"


def _margin(v) -> str:
    return f"±{v:.2f}"


def match_stats_frame(match_stats: Mapping[str, ModelMatchStats]) -> pd.DataFrame:
    records = [
        {"model": name, "avgTime": s.avg_move_time, "moves": s.sample_move_count, "nnRows": s.nn_row_count}
        for name, s in match_stats.items()
    ]
    return pd.DataFrame(records, columns=["model", "avgTime", "moves", "nnRows"])


def ratings_frame(ratings: Mapping[str, ModelRatingStats]) -> pd.DataFrame:
    records = [
        {"model": name, "winPercent": s.win_percent, "elo": s.rating, "error": s.rating_error}
        for name, s in ratings.items()
    ]
    return pd.DataFrame(records, columns=["model", "winPercent", "elo", "error"])


def derived_frame(rows: Iterable[DerivedRow]) -> pd.DataFrame:
    return pd.DataFrame([row.as_dict() for row in rows], columns=DERIVED_COLUMNS)


def format_match_table(match_stats: Mapping[str, ModelMatchStats]) -> pd.DataFrame:
    """Display table of per-model timing stats."""
    return pd.DataFrame([
        {
            "Model": name,
            "Avg move time (s)": format_value(s.avg_move_time, _fixed(6)),
            "Moves": format_value(s.sample_move_count, str),
            "NN rows": format_value(s.nn_row_count, _thousands),
        }
        for name, s in match_stats.items()
    ], columns=["Model", "Avg move time (s)", "Moves", "NN rows"])


def format_rating_table(ratings: Mapping[str, ModelRatingStats]) -> pd.DataFrame:
    """Display table of per-model ratings."""
    return pd.DataFrame([
        {
            "Model": name,
            "Win %": format_value(s.win_percent, _percent),
            "Elo": format_value(s.rating, _fixed(2)),
            "Error": format_value(s.rating_error, _margin),
        }
        for name, s in ratings.items()
    ], columns=["Model", "Win %", "Elo", "Error"])


def format_derived_table(rows: Iterable[DerivedRow]) -> pd.DataFrame:
    """Display table of comparative metrics."""
    return pd.DataFrame([
        {
            "Model": row.model,
            "Baseline": format_value(row.baseline, str),
            "Relative speed": format_value(row.relative_speed, _fixed(2)),
            "Elo / NN row": format_value(row.elo_per_row, lambda v: f"{v:.3e}"),
            "Efficiency (Elo/s)": format_value(row.efficiency, _fixed(2)),
            "Verdict": row.verdict.value,
        }
        for row in rows
    ], columns=["Model", "Baseline", "Relative speed", "Elo / NN row", "Efficiency (Elo/s)", "Verdict"])


def format_history_table(history: RunHistoryAggregator) -> pd.DataFrame:
    """Display table with one line per (run, model)."""
    lines = []
    for run in history:
        for row in run.rows:
            lines.append({
                "Run": run.label,
                "Model": row.model,
                "Win %": format_value(row.win_percent, _percent),
                "Elo": format_value(row.elo, _fixed(2)),
                "Error": format_value(row.elo_error, _margin),
                "Avg move time (s)": format_value(row.avg_time, _fixed(6)),
                "NN rows": format_value(row.nn_rows, _thousands),
                "Efficiency (Elo/s)": format_value(row.efficiency, _fixed(2)),
            })
    return pd.DataFrame(lines, columns=[
        "Run", "Model", "Win %", "Elo", "Error", "Avg move time (s)", "NN rows", "Efficiency (Elo/s)",
    ])


def to_text(df: pd.DataFrame, empty_message: Optional[str] = None, index: bool = False) -> str:
    """Render a display table as plain text, optionally with its index."""
    if df.empty:
        return empty_message or "(no rows)"
    return df.to_string(index=index)
