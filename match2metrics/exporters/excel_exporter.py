"""
Excel export of single-run analyses and run histories.
"""

import logging
from pathlib import Path
from typing import Dict, Union

import pandas as pd
from openpyxl.styles import Font, PatternFill

from ..analysis.history import RunHistoryAggregator
from ..core.interfaces import Verdict
from ..pipeline import RunAnalysis
from ..utils.tables import derived_frame, match_stats_frame, ratings_frame

logger = logging.getLogger(__name__)

HEADER_FILL = PatternFill(start_color="B3E5FC", end_color="B3E5FC", fill_type="solid")
VERDICT_FILLS = {
    Verdict.STRONGER.value: PatternFill(start_color="E8F5E8", end_color="E8F5E8", fill_type="solid"),
    Verdict.WEAKER.value: PatternFill(start_color="FCE4EC", end_color="FCE4EC", fill_type="solid"),
}


class ExcelExporter:
    """
    Excel exporter for match analyses.

    A single run is written as one workbook with Derived, MatchStats and
    Ratings sheets. A run history is written as History (one line per run
    and model) and RatingTrend (one line per run, one column per model).
    """

    def __init__(self, max_column_width: int = 24):
        self.max_column_width = max_column_width

    def export_run(self, analysis: RunAnalysis, output_path: Union[str, Path]) -> Path:
        """Write one run's tables to an Excel workbook."""
        sheets = {
            "Derived": derived_frame(analysis.derived.rows),
            "MatchStats": match_stats_frame(analysis.match_stats),
            "Ratings": ratings_frame(analysis.ratings),
        }
        return self._write(sheets, output_path)

    def export_history(self, history: RunHistoryAggregator, output_path: Union[str, Path]) -> Path:
        """Write a run history to an Excel workbook."""
        sheets = {
            "History": history.to_frame(),
            "RatingTrend": self._trend_frame(history),
        }
        return self._write(sheets, output_path)

    @staticmethod
    def _trend_frame(history: RunHistoryAggregator) -> pd.DataFrame:
        """Rating trend with the run labels as a leading column."""
        trend = history.rating_trend()
        frame = trend.reset_index(drop=True)
        frame.insert(0, "run", trend.index.tolist(), allow_duplicates=True)
        return frame

    def _write(self, sheets: Dict[str, pd.DataFrame], output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            for sheet_name, df in sheets.items():
                df.to_excel(writer, sheet_name=sheet_name, index=False)
                self._format_worksheet(writer.sheets[sheet_name], df)
                logger.debug(f"Wrote sheet {sheet_name} ({len(df)} rows)")

        logger.info(f"Excel workbook written to {output_path}")
        return output_path

    def _format_worksheet(self, worksheet, df: pd.DataFrame) -> None:
        """Size columns to content, highlight headers and verdict cells."""
        for column in worksheet.columns:
            max_length = 0
            for cell in column:
                if cell.value is not None:
                    max_length = max(max_length, len(str(cell.value)))
            worksheet.column_dimensions[column[0].column_letter].width = min(max_length + 2, self.max_column_width)

        for col_idx in range(1, len(df.columns) + 1):
            cell = worksheet.cell(row=1, column=col_idx)
            cell.fill = HEADER_FILL
            cell.font = Font(bold=True)

        if "verdict" in df.columns:
            col_idx = list(df.columns).index("verdict") + 1
            for row_idx in range(2, len(df) + 2):
                cell = worksheet.cell(row=row_idx, column=col_idx)
                fill = VERDICT_FILLS.get(cell.value)
                if fill is not None:
                    cell.fill = fill
