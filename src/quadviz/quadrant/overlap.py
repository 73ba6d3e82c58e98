"""Group co-located players so their labels can be fanned out."""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from quadviz.models import PlayerRecord


CoordinateKey = Tuple[float, float]
OverlapIndex = Mapping[CoordinateKey, List[str]]


def _round2(value: float) -> float:
    # Half-up on the scaled value, same as the browser's Math.round.
    return math.floor(value * 100 + 0.5) / 100


def coordinate_key(x: float, y: float) -> CoordinateKey:
    return (_round2(x), _round2(y))


def player_key(player: PlayerRecord, x_metric: str, y_metric: str) -> Optional[CoordinateKey]:
    x = player.metric(x_metric)
    y = player.metric(y_metric)
    if x is None or y is None:
        return None
    return coordinate_key(x, y)


def build_overlap_index(
    players: Sequence[PlayerRecord], x_metric: str, y_metric: str
) -> Dict[CoordinateKey, List[str]]:
    """Bucket player ids by rounded coordinate, preserving player order."""

    index: Dict[CoordinateKey, List[str]] = {}
    for player in players:
        key = player_key(player, x_metric, y_metric)
        if key is None:
            continue
        index.setdefault(key, []).append(player.player_id)
    return index


def overlap_slot(index: OverlapIndex, key: Optional[CoordinateKey], player_id: str) -> Tuple[int, int]:
    """Return ``(position_in_group, group_size)``; ``(0, 1)`` when not grouped."""

    if key is None:
        return 0, 1
    group = index.get(key)
    if not group or player_id not in group:
        return 0, 1
    return group.index(player_id), len(group)


__all__ = [
    "CoordinateKey",
    "OverlapIndex",
    "build_overlap_index",
    "coordinate_key",
    "overlap_slot",
    "player_key",
]
