"""Player models shared across ingest, analysis and rendering layers."""

from .display import LabelMode, Theme
from .player import PlayerRecord

__all__ = ["LabelMode", "PlayerRecord", "Theme"]
