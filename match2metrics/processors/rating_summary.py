"""
Rating summary parser.

Extracts Elo-like ratings, their error margins and win percentages from the
text summary printed by the tournament SGF summarizer.
"""

import re
import logging
from dataclasses import replace
from typing import Dict, Optional

from ..core.interfaces import ModelRatingStats, TextParser

logger = logging.getLogger(__name__)


class RatingSummaryParser(TextParser):
    """
    Parser for tournament rating summaries.

    Rating lines look like ``FMSWA7              :    48.41 +/- 25.16``.
    Win percentages are matched as any name-like run of text followed by a
    number and ``%`` (e.g. ``KW29 b18c384nbt 1018   29.5%``). The win
    percentage pattern is deliberately loose and can pick up incidental
    numeric text that is not a genuine win-percentage row.
    """

    RATING_LINE_PATTERN = re.compile(
        r"^([^\n:]+?)\s*:\s*(-?\d+\.\d+)\s*\+/-\s*(\d+\.\d+)", re.MULTILINE
    )
    WIN_PERCENT_PATTERN = re.compile(r"([A-Za-z0-9\-\s\.]+?)\s+([0-9]+\.[0-9]+)%")

    def parse(self, text: Optional[str]) -> Dict[str, ModelRatingStats]:
        """
        Parse a rating summary.

        Args:
            text: Raw summary text

        Returns:
            Mapping from model name to (possibly partial) ModelRatingStats
        """
        if not text:
            return {}

        results: Dict[str, ModelRatingStats] = {}

        for match in self.RATING_LINE_PATTERN.finditer(text):
            name = match.group(1).strip()
            current = results.get(name, ModelRatingStats())
            results[name] = replace(
                current,
                rating=float(match.group(2)),
                rating_error=float(match.group(3)),
            )

        for match in self.WIN_PERCENT_PATTERN.finditer(text):
            name = match.group(1).strip()
            current = results.get(name, ModelRatingStats())
            results[name] = replace(current, win_percent=float(match.group(2)))

        logger.debug(f"Parsed rating stats for {len(results)} models")
        return results
