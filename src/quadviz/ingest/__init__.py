"""Input adapters that normalize raw player datasets."""

from .players import (
    DEFAULT_PLAYER_MAPPING,
    DatasetError,
    PlayerRow,
    filter_by_position,
    load_players,
    load_players_csv,
    load_players_json,
    rows_to_records,
)

__all__ = [
    "DEFAULT_PLAYER_MAPPING",
    "DatasetError",
    "PlayerRow",
    "filter_by_position",
    "load_players",
    "load_players_csv",
    "load_players_json",
    "rows_to_records",
]
