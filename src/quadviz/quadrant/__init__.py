"""Quadrant engine: medians, overlap groups, label layout and interaction state."""

from .analysis import (
    QuadrantAnalysis,
    QuadrantStats,
    analyze,
    compute_stats,
    lower_median,
    quadrant_labels,
)
from .layout import LabelSpec, MarkerSpec, MarkerStyle, compute_marker, initials
from .metrics import available_metrics, coerce_axes, metric_display_name, resolve_axes
from .overlap import build_overlap_index, coordinate_key, overlap_slot
from .session import QuadrantSession
from .state import InteractionState

__all__ = [
    "InteractionState",
    "LabelSpec",
    "MarkerSpec",
    "MarkerStyle",
    "QuadrantAnalysis",
    "QuadrantSession",
    "QuadrantStats",
    "analyze",
    "available_metrics",
    "build_overlap_index",
    "coerce_axes",
    "compute_marker",
    "compute_stats",
    "coordinate_key",
    "initials",
    "lower_median",
    "metric_display_name",
    "overlap_slot",
    "quadrant_labels",
    "resolve_axes",
]
