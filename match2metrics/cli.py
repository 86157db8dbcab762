"""
Command-line interface for the Match2Metrics analytics tool.

Parses engine-vs-engine match logs and rating summaries, compares every
model against a baseline, and tracks ratings across runs.
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional
import logging

from .analysis.history import RunHistoryAggregator
from .core.config import AnalysisConfig, load_config
from .data.loaders import RunTextLoader
from .exporters.csv_exporter import CsvExporter
from .exporters.excel_exporter import ExcelExporter
from .pipeline import RunAnalysis, analyze_run, analyze_runs
from .utils.helpers import create_output_directories, setup_logging
from .utils import plotting
from .utils.tables import (
    format_derived_table, format_history_table, format_match_table,
    format_rating_table, to_text
)

logger = logging.getLogger("match2metrics")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Match2Metrics: compare engine match runs against a baseline model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze one run
  python main.py analyze --match-log match.log --summary summary.txt

  # Force the baseline and export CSV/Excel plus charts
  python main.py analyze --match-log match.log --summary summary.txt --baseline FMSWA7 --export --plots

  # Track ratings over every run directory under runs/
  python main.py history --runs-dir runs/

  # Track selected runs in a given order
  python main.py history --runs-dir runs/ --runs run_03 run_01
        """
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set the logging level"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Path to log file (optional)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file (optional)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a single run")
    analyze_parser.add_argument("--match-log", type=Path, help="Match log file")
    analyze_parser.add_argument("--summary", type=Path, help="Rating summary file")
    _add_common_arguments(analyze_parser)

    history_parser = subparsers.add_parser("history", help="Track ratings across runs")
    history_parser.add_argument(
        "--runs-dir",
        type=Path,
        required=True,
        help="Directory with one sub-directory per run"
    )
    history_parser.add_argument(
        "--runs",
        nargs="+",
        help="Run sub-directory names in processing order (default: all, sorted)"
    )
    _add_common_arguments(history_parser)

    return parser


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("--baseline", help="Baseline model name (default: highest rated)")
    subparser.add_argument("--output-dir", type=Path, help="Output directory for exports and plots")
    subparser.add_argument("--export", action="store_true", help="Write CSV and Excel exports")
    subparser.add_argument("--plots", action="store_true", help="Write PNG charts")


def _output_dirs(args: argparse.Namespace, config: AnalysisConfig) -> Dict[str, Path]:
    return create_output_directories(args.output_dir or config.output_dir)


def run_analyze(args: argparse.Namespace, config: AnalysisConfig) -> int:
    """Analyze one run and print its tables."""
    if args.match_log is None and args.summary is None:
        print("Please provide --match-log and/or --summary")
        return 1

    loader = RunTextLoader(match_log_filename=config.match_log_filename,
                           summary_filename=config.summary_filename)
    run_text = loader.load_files(args.match_log, args.summary)
    analysis = analyze_run(run_text.match_text, run_text.summary_text, args.baseline or config.baseline)

    if not analysis.has_models:
        print("Nothing to display: no models found in either input")
        return 0

    print("\nMatch log")
    print(to_text(format_match_table(analysis.match_stats)))
    print("\nRatings")
    print(to_text(format_rating_table(analysis.ratings)))
    print(f"\nComparison (baseline: {analysis.derived.baseline})")
    print(to_text(format_derived_table(analysis.derived.rows)))

    if args.export or args.plots:
        dirs = _output_dirs(args, config)
        if args.export:
            _export_run(analysis, dirs["exports"], config)
        if args.plots:
            _plot_run(analysis, dirs["plots"], config)
    return 0


def _export_run(analysis: RunAnalysis, export_dir: Path, config: AnalysisConfig) -> None:
    csv_path = CsvExporter(config.export).export(analysis.derived.rows, export_dir / config.export.csv_filename)
    excel_path = ExcelExporter().export_run(analysis, export_dir / config.export.excel_filename)
    print(f"\nExported: {csv_path}, {excel_path}")


def _plot_run(analysis: RunAnalysis, plots_dir: Path, config: AnalysisConfig) -> None:
    baseline = analysis.derived.baseline
    plotting.plot_rating_bars(analysis.ratings, baseline, config.plots, save_path=str(plots_dir / "elo.png"))
    plotting.plot_move_times(analysis.match_stats, baseline, config.plots, save_path=str(plots_dir / "move_time.png"))
    plotting.plot_win_share(analysis.ratings, config.plots, save_path=str(plots_dir / "win_share.png"))
    plotting.plot_efficiency_scatter(analysis.derived.rows, config.plots,
                                     save_path=str(plots_dir / "efficiency.png"))
    print(f"\nCharts saved to: {plots_dir}")


def run_history(args: argparse.Namespace, config: AnalysisConfig) -> int:
    """Analyze several runs and print the history and rating trend."""
    loader = RunTextLoader(args.runs_dir, config.match_log_filename, config.summary_filename)
    run_ids: List[str] = args.runs or loader.discover_runs()
    if not run_ids:
        print(f"No runs found in {args.runs_dir}")
        return 1

    history = analyze_runs(run_ids, loader.load, RunHistoryAggregator(), args.baseline or config.baseline)
    if not len(history):
        print("Nothing to display: no run produced any model")
        return 0

    print(f"\nRun history ({len(history)} of {len(run_ids)} runs)")
    print(to_text(format_history_table(history)))
    print("\nRating trend")
    print(to_text(history.rating_trend(), "(no non-baseline models)", index=True))

    if args.export or args.plots:
        dirs = _output_dirs(args, config)
        if args.export:
            history_path = ExcelExporter().export_history(history, dirs["exports"] / "history.xlsx")
            print(f"\nExported: {history_path}")
        if args.plots:
            chart_path = dirs["plots"] / "rating_history.png"
            plotting.plot_rating_history(history, config.plots, save_path=str(chart_path))
            print(f"\nChart saved to: {chart_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.log_level, args.log_file)

    try:
        config = load_config(args.config)
        if args.command == "analyze":
            return run_analyze(args, config)
        elif args.command == "history":
            return run_history(args, config)
    except KeyboardInterrupt:
        print("\nAnalysis interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Command failed: {e}")
        print(f"\nError: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
