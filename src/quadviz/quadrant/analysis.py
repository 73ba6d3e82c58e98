"""Median reference lines and elite classification for the active player set."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Sequence, Union

from quadviz.config.positions import (
    GENERIC_QUADRANT_LABELS,
    Position,
    QuadrantLabels,
    get_catalog,
)
from quadviz.models import PlayerRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuadrantStats:
    x_median: Optional[float]
    y_median: Optional[float]
    sample_size: int = 0

    @property
    def has_reference_lines(self) -> bool:
        return self.x_median is not None and self.y_median is not None


@dataclass(frozen=True)
class QuadrantAnalysis:
    stats: QuadrantStats
    elite_ids: FrozenSet[str] = field(default_factory=frozenset)
    excluded_ids: FrozenSet[str] = field(default_factory=frozenset)

    def is_elite(self, player_id: str) -> bool:
        return player_id in self.elite_ids


def lower_median(values: Iterable[float]) -> Optional[float]:
    """Element at index ``n // 2`` of the ascending sort, or None when empty."""

    ordered = sorted(values)
    if not ordered:
        return None
    return ordered[len(ordered) // 2]


def _plottable(
    players: Sequence[PlayerRecord], x_metric: str, y_metric: str
) -> tuple[list[tuple[PlayerRecord, float, float]], set[str]]:
    points: list[tuple[PlayerRecord, float, float]] = []
    excluded: set[str] = set()
    for player in players:
        x = player.metric(x_metric)
        y = player.metric(y_metric)
        if x is None or y is None:
            excluded.add(player.player_id)
            continue
        points.append((player, x, y))
    if excluded:
        logger.warning(
            "Excluded %d player(s) without finite %s/%s values from quadrant stats",
            len(excluded),
            x_metric,
            y_metric,
        )
    return points, excluded


def compute_stats(players: Sequence[PlayerRecord], x_metric: str, y_metric: str) -> QuadrantStats:
    """Compute per-axis lower medians over players with finite values on both axes."""

    return analyze(players, x_metric, y_metric).stats


def analyze(players: Sequence[PlayerRecord], x_metric: str, y_metric: str) -> QuadrantAnalysis:
    """Medians plus the set of players at or above both medians."""

    points, excluded = _plottable(players, x_metric, y_metric)
    stats = QuadrantStats(
        x_median=lower_median(x for _, x, _ in points),
        y_median=lower_median(y for _, _, y in points),
        sample_size=len(points),
    )
    if not stats.has_reference_lines:
        return QuadrantAnalysis(stats=stats, excluded_ids=frozenset(excluded))

    elite = frozenset(
        player.player_id
        for player, x, y in points
        if x >= stats.x_median and y >= stats.y_median  # type: ignore[operator]
    )
    logger.debug(
        "Quadrant stats for %s/%s: medians=(%s, %s) elite=%d/%d",
        x_metric,
        y_metric,
        stats.x_median,
        stats.y_median,
        len(elite),
        stats.sample_size,
    )
    return QuadrantAnalysis(stats=stats, elite_ids=elite, excluded_ids=frozenset(excluded))


def quadrant_labels(
    position: Union[str, Position, None], x_metric: str, y_metric: str
) -> QuadrantLabels:
    """Named quadrants for known metric pairs, directional labels otherwise."""

    catalog = get_catalog(position)
    return catalog.quadrant_labels.get((x_metric, y_metric), GENERIC_QUADRANT_LABELS)


__all__ = [
    "QuadrantAnalysis",
    "QuadrantStats",
    "analyze",
    "compute_stats",
    "lower_median",
    "quadrant_labels",
]
