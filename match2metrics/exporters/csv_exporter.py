"""
CSV export of derived comparison rows.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from ..core.config import ExportConfig
from ..core.interfaces import DerivedRow

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "Model", "Baseline", "AvgMoveTime(s)", "TotalMoves(sample)", "NNRows",
    "WinPercent", "Elo", "EloError", "RelativeSpeed", "EloPerNNRow",
    "Efficiency(Elo_per_sec)", "Verdict",
]


def _plain(value) -> str:
    """Render a raw value; integral floats drop their trailing ``.0``."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _fixed(value: Optional[float], decimals: int) -> str:
    return "" if value is None else f"{value:.{decimals}f}"


def _exponential(value: Optional[float], digits: int) -> str:
    return "" if value is None else f"{value:.{digits}e}"


class CsvExporter:
    """Writes DerivedRow sets as a comma-separated table."""

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()

    def format_row(self, row: DerivedRow) -> list:
        """Return the CSV fields for one derived row."""
        return [
            row.model,
            row.baseline or "",
            _plain(row.avg_time),
            _plain(row.moves),
            _plain(row.nn_rows),
            _plain(row.win_percent),
            _plain(row.elo),
            _plain(row.elo_error),
            _fixed(row.relative_speed, self.config.relative_speed_decimals),
            _exponential(row.elo_per_row, self.config.elo_per_row_exponent_digits),
            _fixed(row.efficiency, self.config.efficiency_decimals),
            row.verdict.value,
        ]

    def render(self, rows: Iterable[DerivedRow]) -> str:
        """Render rows as CSV text with the header line first."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        for row in rows:
            writer.writerow(self.format_row(row))
        return buffer.getvalue()

    def export(self, rows: Iterable[DerivedRow], output_path: Union[str, Path]) -> Path:
        """Write rows to a CSV file and return its path."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        rows = list(rows)
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            f.write(self.render(rows))
        logger.info(f"CSV summary written to {output_path} (rows: {len(rows)})")
        return output_path

    @staticmethod
    def read(path: Union[str, Path]) -> pd.DataFrame:
        """Read an exported CSV back into a DataFrame."""
        return pd.read_csv(path)
