"""
Test text loading and the single/multi-run pipelines.
"""

import sys

sys.path.append('.')

from match2metrics.analysis.history import RunHistoryAggregator
from match2metrics.data.loaders import RunText, RunTextLoader, read_text
from match2metrics.pipeline import analyze_run, analyze_runs


class TestRunTextLoader:
    """Test cases for RunTextLoader."""

    def test_load_both_sources(self, runs_dir, match_log_text):
        run_text = RunTextLoader(runs_dir).load("run_a")
        assert run_text.run_id == "run_a"
        assert run_text.match_text == match_log_text.strip()
        assert run_text.summary_text is not None
        assert not run_text.is_empty

    def test_missing_source_is_none(self, runs_dir):
        run_text = RunTextLoader(runs_dir).load("run_b")
        assert run_text.match_text is None
        assert run_text.summary_text is not None

    def test_missing_run_is_empty(self, runs_dir):
        run_text = RunTextLoader(runs_dir).load("does_not_exist")
        assert run_text.is_empty

    def test_discover_runs(self, runs_dir):
        assert RunTextLoader(runs_dir).discover_runs() == ["run_a", "run_b"]

    def test_discover_missing_dir(self, tmp_path):
        assert RunTextLoader(tmp_path / "nope").discover_runs() == []

    def test_custom_filenames(self, tmp_path):
        run = tmp_path / "r1"
        run.mkdir()
        (run / "games.txt").write_text("Avg move time used by A 1.0 10 moves")
        loader = RunTextLoader(tmp_path, match_log_filename="games.txt")
        assert loader.discover_runs() == ["r1"]
        assert loader.load("r1").match_text.startswith("Avg move time")

    def test_load_files(self, tmp_path):
        path = tmp_path / "summary.txt"
        path.write_text("  X : 1.00 +/- 2.00  \n")
        run_text = RunTextLoader().load_files(None, path)
        assert run_text.match_text is None
        assert run_text.summary_text == "X : 1.00 +/- 2.00"

    def test_read_text_undecodable(self, tmp_path):
        path = tmp_path / "binary.log"
        path.write_bytes(b"\xff\xfe\xfa")
        assert read_text(path) is None

    def test_whitespace_only_is_empty(self):
        assert RunText("r", match_text="   \n", summary_text=None).is_empty


class TestAnalyzeRun:
    """Test cases for analyze_run."""

    def test_both_sources(self, match_log_text, summary_text):
        analysis = analyze_run(match_log_text, summary_text)
        assert analysis.has_models
        assert analysis.derived.baseline == "KW29"
        assert [r.model for r in analysis.derived.rows] == ["KW29", "FMSWA7"]

    def test_neither_source(self):
        analysis = analyze_run(None, None)
        assert not analysis.has_models
        assert analysis.match_stats == {}
        assert analysis.ratings == {}
        assert analysis.derived.baseline is None
        assert analysis.derived.rows == ()

    def test_match_log_only(self, match_log_text):
        analysis = analyze_run(match_log_text, "")
        assert analysis.derived.baseline == "KW29"
        assert all(r.elo is None for r in analysis.derived.rows)

    def test_summary_only(self, summary_text):
        analysis = analyze_run(None, summary_text)
        assert analysis.has_models
        assert analysis.derived.baseline == "KW29"
        assert analysis.derived.rows == ()

    def test_explicit_baseline(self, match_log_text, summary_text):
        analysis = analyze_run(match_log_text, summary_text, baseline="FMSWA7")
        assert analysis.derived.baseline == "FMSWA7"
        kw29 = analysis.derived.rows[0]
        assert kw29.relative_speed == 2.0
        assert kw29.verdict.value == "Stronger than baseline"


class TestAnalyzeRuns:
    """Test cases for analyze_runs."""

    def test_processes_in_order_and_skips_empty(self, runs_dir):
        loader = RunTextLoader(runs_dir)
        history = analyze_runs(["run_b", "run_c", "missing", "run_a"], loader.load)

        assert history.labels == ["run_b", "run_a"]
        assert history.runs[0].rows == ()
        assert history.rating_series("FMSWA7") == [None, 0.0]

    def test_appends_to_existing_history(self, runs_dir):
        loader = RunTextLoader(runs_dir)
        history = RunHistoryAggregator()
        analyze_runs(["run_a"], loader.load, history)
        analyze_runs(["run_a"], loader.load, history)
        assert history.labels == ["run_a", "run_a"]

    def test_fetch_returning_none_is_skipped(self, match_log_text):
        texts = {"good": RunText("good", match_text=match_log_text)}
        history = analyze_runs(["bad", "good"], texts.get)
        assert history.labels == ["good"]

    def test_run_without_models_is_skipped(self):
        texts = {"noise": RunText("noise", match_text="no recognizable lines")}
        assert len(analyze_runs(["noise"], texts.get)) == 0

    def test_shared_baseline(self, runs_dir):
        history = analyze_runs(["run_a"], RunTextLoader(runs_dir).load, baseline="FMSWA7")
        assert {r.baseline for r in history.runs[0].rows} == {"FMSWA7"}

    def test_fetch_error_does_not_stop_later_runs(self, match_log_text):
        def fetch(run_id):
            if run_id == "bad":
                raise ConnectionError("fetch failed")
            return RunText(run_id, match_text=match_log_text)

        history = analyze_runs(["bad", "good"], fetch)
        assert history.labels == ["good"]
