"""Baseline selection, derived metrics and run history."""

from .baseline import BaselineSelector
from .metrics import MetricsDeriver
from .history import RunHistoryAggregator

__all__ = ["BaselineSelector", "MetricsDeriver", "RunHistoryAggregator"]
