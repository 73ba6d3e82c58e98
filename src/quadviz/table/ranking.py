"""Search, sort and formatting helpers for the player ranking table."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import List, Literal, Optional, Sequence, Tuple, Union

from quadviz.config.positions import OVERALL_RATING, MetricOption, Position, get_catalog
from quadviz.models import PlayerRecord


logger = logging.getLogger(__name__)


_PERCENT_METRICS = {
    "catchRate",
    "targetShare",
    "shortCompletionPct",
    "intermediateCompletionPct",
    "longCompletionPct",
    "rushTdPct",
}
_COUNT_METRICS = {"redZoneTargets"}


@dataclass(frozen=True)
class RankingCriteria:
    """Search and sort configuration for the ranking table."""

    search_query: str = ""
    sort_metric: str = OVERALL_RATING
    sort_direction: Literal["asc", "desc"] = "desc"

    def describe(self) -> str:
        order = "highest first" if self.sort_direction == "desc" else "lowest first"
        return f"Sorted by {self.sort_metric} ({order})"


@dataclass(frozen=True)
class RankedPlayer:
    rank: int
    player: PlayerRecord
    selected: bool = False


def _matches(player: PlayerRecord, query: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    return needle in player.name.lower() or needle in player.team.lower()


def rank_players(
    players: Sequence[PlayerRecord],
    criteria: RankingCriteria,
    *,
    selected_player_id: Optional[str] = None,
) -> List[RankedPlayer]:
    """Filter by name/team substring and sort; missing values always sort last."""

    matched = [player for player in players if _matches(player, criteria.search_query)]
    present = [p for p in matched if p.metric(criteria.sort_metric) is not None]
    missing = [p for p in matched if p.metric(criteria.sort_metric) is None]
    present.sort(
        key=lambda p: p.metric(criteria.sort_metric),  # type: ignore[arg-type, return-value]
        reverse=criteria.sort_direction != "asc",
    )
    return [
        RankedPlayer(rank=index, player=player, selected=player.player_id == selected_player_id)
        for index, player in enumerate(present + missing, start=1)
    ]


def coerce_sort_metric(position: Union[str, Position, None], metric: Optional[str]) -> str:
    """Validate a sort column against the position's catalog, falling back to the rating."""

    if not metric:
        return OVERALL_RATING
    catalog = get_catalog(position)
    if catalog.accepts(metric):
        return metric
    logger.warning(
        "Sort metric %r is not available for %s; sorting by %s",
        metric,
        catalog.position.value,
        OVERALL_RATING,
    )
    return OVERALL_RATING


def toggle_sort(criteria: RankingCriteria, metric: str) -> RankingCriteria:
    """Flip direction on the active column, otherwise switch column descending."""

    if criteria.sort_metric == metric:
        direction = "asc" if criteria.sort_direction == "desc" else "desc"
        return replace(criteria, sort_direction=direction)
    return replace(criteria, sort_metric=metric, sort_direction="desc")


def format_metric_value(value: Optional[float], metric: str) -> str:
    if value is None:
        return "N/A"
    if metric in _PERCENT_METRICS:
        return f"{value:.1f}%"
    if metric in _COUNT_METRICS or "Touchdowns" in metric or "Receptions" in metric:
        return str(math.floor(value + 0.5))
    return f"{value:.2f}"


def column_headers(
    position: Union[str, Position],
    x_metric: str,
    y_metric: str,
) -> Tuple[MetricOption, ...]:
    """Metric columns shown after Rank/Player/Team, ending with the rating."""

    catalog = get_catalog(position)
    if catalog.position is Position.QB:
        columns = list(catalog.table_columns)
    else:
        columns = [
            MetricOption(x_metric, x_metric[:1].upper() + x_metric[1:3]),
            MetricOption(y_metric, y_metric[:1].upper() + y_metric[1:3]),
        ]
        columns.extend(
            option
            for option in catalog.table_columns
            if option.key not in (x_metric, y_metric)
        )
    columns.append(MetricOption(OVERALL_RATING, "Rating"))
    return tuple(columns)


def render_table(
    players: Sequence[PlayerRecord],
    criteria: RankingCriteria,
    columns: Sequence[MetricOption],
    *,
    selected_player_id: Optional[str] = None,
) -> str:
    """Plain-text rendering used by the CLI; the selected row is starred."""

    header = ["Rank", "Player", "Team", *(column.label for column in columns)]
    lines = ["\t".join(header)]
    for ranked in rank_players(players, criteria, selected_player_id=selected_player_id):
        player = ranked.player
        cells = [
            f"{ranked.rank}{'*' if ranked.selected else ''}",
            player.name,
            player.team,
            *(format_metric_value(player.metric(column.key), column.key) for column in columns),
        ]
        lines.append("\t".join(cells))
    return "\n".join(lines)


__all__ = [
    "RankedPlayer",
    "RankingCriteria",
    "coerce_sort_metric",
    "column_headers",
    "format_metric_value",
    "rank_players",
    "render_table",
    "toggle_sort",
]
