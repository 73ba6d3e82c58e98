"""Configuration helpers for position catalogs and display defaults."""

from .positions import (
    GENERIC_QUADRANT_LABELS,
    OVERALL_RATING,
    MetricOption,
    Position,
    PositionCatalog,
    QuadrantLabels,
    get_catalog,
    metric_display_name,
    position_label,
)
from .settings import DisplaySettings, load_display_settings

__all__ = [
    "GENERIC_QUADRANT_LABELS",
    "OVERALL_RATING",
    "DisplaySettings",
    "MetricOption",
    "Position",
    "PositionCatalog",
    "QuadrantLabels",
    "get_catalog",
    "load_display_settings",
    "metric_display_name",
    "position_label",
]
