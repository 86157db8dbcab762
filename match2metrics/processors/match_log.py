"""
Match log parser.

Extracts per-model move timing and neural-net row counts from the free-text
log written by an engine-vs-engine match runner.
"""

import re
import logging
from dataclasses import replace
from typing import Dict, List, Optional

from ..core.interfaces import ModelMatchStats, TextParser

logger = logging.getLogger(__name__)


class MatchLogParser(TextParser):
    """
    Parser for match-runner move timing logs.

    Repeated "Avg move time" samples for one model overwrite the average
    (later samples have converged) and keep the smallest move count seen.
    "NN rows" lines carry no model name and are paired with models by
    order of first appearance; this pairing is best effort and silently
    wrong when the lines do not correspond one to one with the models.

    A sample whose time token is not a valid number (e.g. "1.2.3") is
    skipped entirely rather than truncated to its leading numeric prefix,
    so a model seen only in such samples gets no record.
    """

    AVG_MOVE_TIME_PATTERN = re.compile(r"Avg move time used by (.+?)\s+([0-9.]+)\s+(\d+)\s+moves")
    NN_ROWS_PATTERN = re.compile(r"NN rows:\s+(\d+)")

    def parse(self, text: Optional[str]) -> Dict[str, ModelMatchStats]:
        """
        Parse a match log.

        Args:
            text: Raw match log text

        Returns:
            Mapping from model name to ModelMatchStats in order of first appearance
        """
        if not text:
            return {}

        models: Dict[str, ModelMatchStats] = {}

        for match in self.AVG_MOVE_TIME_PATTERN.finditer(text):
            model, time_token, moves_token = match.groups()
            try:
                avg_time = float(time_token)
            except ValueError:
                logger.debug(f"Skipping malformed move time {time_token!r} for {model}")
                continue
            moves = int(moves_token)

            current = models.get(model)
            if current is None:
                models[model] = ModelMatchStats(avg_move_time=avg_time, sample_move_count=moves)
            else:
                models[model] = replace(
                    current,
                    avg_move_time=avg_time,
                    sample_move_count=min(current.sample_move_count, moves),
                )

        row_counts = self.extract_row_counts(text)
        if row_counts and models:
            if len(row_counts) != len(models):
                logger.warning(
                    f"Found {len(row_counts)} NN row values for {len(models)} models; "
                    "positional assignment may be incorrect"
                )
            for name, rows in zip(list(models), row_counts):
                models[name] = replace(models[name], nn_row_count=rows)

        logger.debug(f"Parsed match stats for {len(models)} models")
        return models

    def extract_row_counts(self, text: str) -> List[int]:
        """Return every "NN rows" value in order of appearance."""
        return [int(value) for value in self.NN_ROWS_PATTERN.findall(text)]
