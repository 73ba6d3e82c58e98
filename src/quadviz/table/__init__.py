"""Ranking table utilities (search, sort, formatting)."""

from .ranking import (
    RankedPlayer,
    RankingCriteria,
    coerce_sort_metric,
    column_headers,
    format_metric_value,
    rank_players,
    render_table,
    toggle_sort,
)

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
