"""
Plotting utilities for match comparisons and run history.
"""
import os
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from typing import Iterable, Mapping, Optional

from ..analysis.history import RunHistoryAggregator
from ..core.config import PlotConfig
from ..core.interfaces import DerivedRow, ModelMatchStats, ModelRatingStats


def _finish(save_path: Optional[str], show: bool, config: PlotConfig) -> None:
    if save_path:
        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        plt.savefig(save_path, dpi=config.dpi, bbox_inches="tight")
    if show:
        plt.show()
    plt.close()


def _bar_colors(labels, baseline: Optional[str], config: PlotConfig, other_color: str) -> list:
    return [config.baseline_color if label == baseline else other_color for label in labels]


def plot_rating_bars(
    ratings: Mapping[str, ModelRatingStats],
    baseline: Optional[str] = None,
    config: Optional[PlotConfig] = None,
    save_path: Optional[str] = None,
    show: bool = False
) -> None:
    """
    Bar chart of ratings with error bars, baseline highlighted.
    Args:
        ratings: Parsed rating records; missing ratings plot as 0
        baseline: Baseline model name
        config: Plot styling
        save_path: If provided, save plot to this path
        show: If True, display the plot interactively
    """
    config = config or PlotConfig()
    labels = list(ratings)
    values = [ratings[k].rating or 0.0 for k in labels]
    errors = [ratings[k].rating_error or 0.0 for k in labels]

    plt.figure(figsize=config.figsize)
    x = np.arange(len(labels))
    plt.bar(x, values, yerr=errors, capsize=4,
            color=_bar_colors(labels, baseline, config, config.highlight_color))
    plt.xticks(x, labels, rotation=30, ha="right")
    plt.ylabel("Elo")
    plt.title("Rating by model")
    plt.grid(True, axis="y", alpha=0.3)
    _finish(save_path, show, config)


def plot_move_times(
    match_stats: Mapping[str, ModelMatchStats],
    baseline: Optional[str] = None,
    config: Optional[PlotConfig] = None,
    save_path: Optional[str] = None,
    show: bool = False
) -> None:
    """Bar chart of average move time per model, baseline highlighted."""
    config = config or PlotConfig()
    labels = list(match_stats)
    values = [match_stats[k].avg_move_time for k in labels]

    plt.figure(figsize=config.figsize)
    x = np.arange(len(labels))
    plt.bar(x, values, color=_bar_colors(labels, baseline, config, "#f59e0b"))
    plt.xticks(x, labels, rotation=30, ha="right")
    plt.ylabel("Avg move time (s)")
    plt.title("Average move time by model")
    plt.grid(True, axis="y", alpha=0.3)
    _finish(save_path, show, config)


def plot_win_share(
    ratings: Mapping[str, ModelRatingStats],
    config: Optional[PlotConfig] = None,
    save_path: Optional[str] = None,
    show: bool = False
) -> None:
    """Pie chart of win percentages for models that report one."""
    config = config or PlotConfig()
    labels = [k for k, v in ratings.items() if v.win_percent]
    values = [ratings[k].win_percent for k in labels]

    plt.figure(figsize=config.figsize)
    if values:
        plt.pie(values, labels=labels, autopct="%1.1f%%",
                colors=sns.color_palette(config.palette, len(values)))
    plt.title("Win %")
    _finish(save_path, show, config)


def plot_efficiency_scatter(
    rows: Iterable[DerivedRow],
    config: Optional[PlotConfig] = None,
    save_path: Optional[str] = None,
    show: bool = False
) -> None:
    """
    Scatter of rating efficiency against relative speed.
    Only rows with both values are plotted.
    """
    config = config or PlotConfig()
    points = [r for r in rows if r.efficiency is not None and r.relative_speed is not None]

    plt.figure(figsize=config.figsize)
    plt.scatter([p.relative_speed for p in points], [p.efficiency for p in points],
                color=config.highlight_color)
    for p in points:
        plt.annotate(p.model, (p.relative_speed, p.efficiency),
                     textcoords="offset points", xytext=(4, 4), fontsize=8)
    plt.xlabel("Relative speed (baseline / model)")
    plt.ylabel("Efficiency (Elo/sec)")
    plt.title("Efficiency vs relative speed")
    plt.grid(True, alpha=0.3)
    _finish(save_path, show, config)


def plot_rating_history(
    history: RunHistoryAggregator,
    config: Optional[PlotConfig] = None,
    save_path: Optional[str] = None,
    show: bool = False
) -> None:
    """
    Line chart of each non-baseline model's rating across runs.
    Missing points are left as gaps.
    """
    config = config or PlotConfig()
    trend = history.rating_trend()
    models = list(trend.columns)
    colors = sns.color_palette(config.palette, max(len(models), 1))
    x = np.arange(len(trend))

    plt.figure(figsize=config.figsize)
    for model, color in zip(models, colors):
        plt.plot(x, trend[model].to_numpy(dtype=float), marker="o", label=model, color=color)
    plt.xticks(x, trend.index.tolist(), rotation=30, ha="right")
    plt.ylabel("Elo")
    plt.title("Rating progression across runs")
    if models:
        plt.legend(loc="best")
    plt.grid(True, alpha=0.3)
    _finish(save_path, show, config)
