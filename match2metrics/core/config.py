"""
Configuration data classes for match-log analytics.

This module defines the configuration objects for export formatting,
chart styling and run discovery following the dataclass pattern for
immutable configuration objects, plus loading from a YAML file.
"""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import logging

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportConfig:
    """Configuration for CSV and Excel export formatting."""

    relative_speed_decimals: int = 4
    efficiency_decimals: int = 4
    elo_per_row_exponent_digits: int = 6
    csv_filename: str = "match_vs_baseline.csv"
    excel_filename: str = "match_vs_baseline.xlsx"

    def __post_init__(self) -> None:
        """Validate export precision settings."""
        for name in ("relative_speed_decimals", "efficiency_decimals", "elo_per_row_exponent_digits"):
            value = getattr(self, name)
            if not 1 <= value <= 10:
                raise ValueError(f"{name} must be between 1 and 10, got {value}")


@dataclass(frozen=True)
class PlotConfig:
    """Configuration for chart rendering."""

    figsize: Tuple[float, float] = (10, 6)
    dpi: int = 150
    palette: str = "husl"
    baseline_color: str = "#60a5fa"
    highlight_color: str = "#34d399"

    def __post_init__(self) -> None:
        """Validate plot configuration."""
        if self.dpi <= 0:
            raise ValueError("DPI must be positive")
        if len(self.figsize) != 2:
            raise ValueError("Figure size must contain width and height")


@dataclass(frozen=True)
class AnalysisConfig:
    """Complete analysis configuration combining all components."""

    baseline: Optional[str] = None
    match_log_filename: str = "match.log"
    summary_filename: str = "summary.txt"
    output_dir: Path = Path("outputs")
    export: ExportConfig = field(default_factory=ExportConfig)
    plots: PlotConfig = field(default_factory=PlotConfig)

    def __post_init__(self) -> None:
        """Validate run file names."""
        if not self.match_log_filename:
            raise ValueError("Match log filename cannot be empty")
        if not self.summary_filename:
            raise ValueError("Summary filename cannot be empty")


def _build(cls, overrides: Dict[str, Any], section: str):
    """Instantiate ``cls`` from defaults plus validated overrides."""
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"Unknown {section} configuration keys: {unknown}")
    return cls(**overrides)


def load_config(path: Optional[Path] = None) -> AnalysisConfig:
    """
    Load analysis configuration from a YAML file.

    Args:
        path: YAML file path; ``None`` or a missing file yields defaults

    Returns:
        AnalysisConfig with file values overriding defaults

    Raises:
        ValueError: If the file contains unknown keys or invalid values
    """
    if path is None:
        return AnalysisConfig()

    path = Path(path)
    if not path.exists():
        logger.warning(f"Config file not found: {path}, using defaults")
        return AnalysisConfig()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    data = dict(data)
    export_overrides = data.pop("export", None) or {}
    plot_overrides = data.pop("plots", None) or {}

    if "figsize" in plot_overrides:
        plot_overrides["figsize"] = tuple(plot_overrides["figsize"])
    if "output_dir" in data:
        data["output_dir"] = Path(data["output_dir"])

    config = _build(AnalysisConfig, data, "analysis")
    config = replace(
        config,
        export=_build(ExportConfig, export_overrides, "export"),
        plots=_build(PlotConfig, plot_overrides, "plots"),
    )
    logger.debug(f"Loaded configuration from {path}")
    return config
