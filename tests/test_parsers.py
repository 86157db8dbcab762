"""
Test the match log and rating summary parsers.
"""

import sys

sys.path.append('.')

from match2metrics.core.interfaces import ModelMatchStats, ModelRatingStats
from match2metrics.processors.match_log import MatchLogParser
from match2metrics.processors.rating_summary import RatingSummaryParser


class TestMatchLogParser:
    """Test cases for MatchLogParser."""

    def test_parse_sample(self, match_log_text):
        models = MatchLogParser().parse(match_log_text)
        assert list(models) == ["KW29", "FMSWA7"]
        assert models["KW29"] == ModelMatchStats(avg_move_time=0.2, sample_move_count=40, nn_row_count=1000)
        assert models["FMSWA7"] == ModelMatchStats(avg_move_time=0.4, sample_move_count=42, nn_row_count=4000)

    def test_repeated_samples_last_time_wins_and_min_moves(self):
        """Later move times overwrite earlier ones; the move count keeps the minimum."""
        text = (
            "Avg move time used by A 1.5 300 moves\n"
            "Avg move time used by A 1.1 100 moves\n"
            "Avg move time used by A 0.9 200 moves\n"
        )
        stats = MatchLogParser().parse(text)["A"]
        assert stats.avg_move_time == 0.9
        assert stats.sample_move_count == 100

    def test_model_name_with_spaces(self):
        text = "Avg move time used by KW29 b18c384nbt   0.0123   57 moves"
        models = MatchLogParser().parse(text)
        assert list(models) == ["KW29 b18c384nbt"]
        assert models["KW29 b18c384nbt"].avg_move_time == 0.0123

    def test_insertion_order_is_first_appearance(self):
        text = (
            "Avg move time used by B 1.0 10 moves\n"
            "Avg move time used by A 1.0 10 moves\n"
            "Avg move time used by B 2.0 20 moves\n"
        )
        assert list(MatchLogParser().parse(text)) == ["B", "A"]

    def test_nn_rows_assigned_positionally(self):
        text = (
            "NN rows: 500\n"
            "Avg move time used by A 1.0 10 moves\n"
            "Avg move time used by B 1.0 10 moves\n"
            "NN rows: 700\n"
        )
        models = MatchLogParser().parse(text)
        assert models["A"].nn_row_count == 500
        assert models["B"].nn_row_count == 700

    def test_models_beyond_row_counts_default_to_zero(self):
        text = (
            "Avg move time used by A 1.0 10 moves\n"
            "NN rows: 500\n"
            "Avg move time used by B 1.0 10 moves\n"
        )
        models = MatchLogParser().parse(text)
        assert models["A"].nn_row_count == 500
        assert models["B"].nn_row_count == 0

    def test_extra_row_counts_are_ignored(self):
        text = "Avg move time used by A 1.0 10 moves\nNN rows: 1\nNN rows: 2\n"
        assert MatchLogParser().parse(text)["A"].nn_row_count == 1

    def test_row_counts_without_models(self):
        assert MatchLogParser().parse("NN rows: 100\nNN rows: 200") == {}

    def test_empty_and_none(self):
        parser = MatchLogParser()
        assert parser.parse(None) == {}
        assert parser.parse("") == {}
        assert parser.parse("nothing to see here") == {}

    def test_malformed_time_is_skipped(self):
        text = (
            "Avg move time used by A 1.2.3 10 moves\n"
            "Avg move time used by B 0.5 10 moves\n"
        )
        assert list(MatchLogParser().parse(text)) == ["B"]

    def test_idempotent(self, match_log_text):
        parser = MatchLogParser()
        assert parser.parse(match_log_text) == parser.parse(match_log_text)
        assert MatchLogParser().parse(match_log_text) == parser.parse(match_log_text)


class TestRatingSummaryParser:
    """Test cases for RatingSummaryParser."""

    def test_rating_line(self):
        results = RatingSummaryParser().parse("X : 48.41 +/- 25.16")
        assert results["X"].rating == 48.41
        assert results["X"].rating_error == 25.16
        assert results["X"].win_percent is None

    def test_negative_rating_and_padding(self):
        results = RatingSummaryParser().parse("FMSWA7              :   -12.50 +/- 3.00\n")
        assert results["FMSWA7"] == ModelRatingStats(rating=-12.5, rating_error=3.0)

    def test_parse_sample(self, summary_text):
        results = RatingSummaryParser().parse(summary_text)
        assert results["KW29"] == ModelRatingStats(rating=48.41, rating_error=25.16, win_percent=56.2)
        assert results["FMSWA7"] == ModelRatingStats(rating=0.0, rating_error=20.0, win_percent=43.8)

    def test_win_percent_only_record(self):
        results = RatingSummaryParser().parse("Leela 61.0%")
        assert results == {"Leela": ModelRatingStats(win_percent=61.0)}

    def test_loose_win_percent_keeps_numeric_text_in_name(self):
        """The win-percent pattern captures everything name-like before the number."""
        results = RatingSummaryParser().parse("KW29 b18c384nbt 1018   29.5%")
        assert list(results) == ["KW29 b18c384nbt 1018"]
        assert results["KW29 b18c384nbt 1018"].win_percent == 29.5

    def test_rating_requires_decimal_point(self):
        assert RatingSummaryParser().parse("X : 48 +/- 25") == {}

    def test_empty_and_none(self):
        parser = RatingSummaryParser()
        assert parser.parse(None) == {}
        assert parser.parse("") == {}

    def test_idempotent(self, summary_text):
        assert RatingSummaryParser().parse(summary_text) == RatingSummaryParser().parse(summary_text)
