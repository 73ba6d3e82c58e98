"""Axis metric resolution for a tracked position."""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from quadviz.config.positions import (
    OVERALL_RATING,
    MetricOption,
    Position,
    get_catalog,
    metric_display_name,
)


logger = logging.getLogger(__name__)

AxisPair = Tuple[str, str]


def resolve_axes(
    position: Union[str, Position, None],
    previous_x: Optional[str] = None,
    previous_y: Optional[str] = None,
) -> AxisPair:
    """Return the axis pair to use after switching to ``position``.

    Known positions always reset to their default pair. Anything else keeps
    the previous selection, falling back to the overall rating.
    """

    catalog = get_catalog(position)
    if catalog.default_axes is not None:
        return catalog.default_axes
    return (previous_x or OVERALL_RATING, previous_y or OVERALL_RATING)


def coerce_axes(
    position: Union[str, Position, None],
    x_metric: str,
    y_metric: str,
    previous: AxisPair,
) -> AxisPair:
    """Validate a requested axis change against the position's catalog."""

    catalog = get_catalog(position)
    resolved = []
    for requested, fallback in zip((x_metric, y_metric), previous):
        if catalog.accepts(requested):
            resolved.append(requested)
            continue
        logger.warning(
            "Metric %r is not available for %s; keeping %r",
            requested,
            catalog.position.value,
            fallback,
        )
        resolved.append(fallback)
    return resolved[0], resolved[1]


def available_metrics(position: Union[str, Position, None]) -> Tuple[MetricOption, ...]:
    return get_catalog(position).metrics


__all__ = [
    "AxisPair",
    "available_metrics",
    "coerce_axes",
    "metric_display_name",
    "resolve_axes",
]
