"""Selection, hover and label-mode state for one quadrant chart."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from quadviz.config.settings import (
    ICON_SIZE_RANGE,
    LABEL_SIZE_RANGE,
    DisplaySettings,
    clamp,
)
from quadviz.models import LabelMode


@dataclass(frozen=True)
class InteractionState:
    """Immutable snapshot; every transition returns a new instance."""

    selected_player_id: Optional[str] = None
    hovered_player_id: Optional[str] = None
    label_mode: LabelMode = LabelMode.ALL
    show_labels: bool = True
    label_size_px: float = 12
    icon_size_px: float = 6
    highlight_elite: bool = True

    @classmethod
    def from_settings(cls, settings: DisplaySettings) -> "InteractionState":
        return cls(
            label_mode=settings.label_mode,
            show_labels=settings.show_labels,
            label_size_px=settings.label_size,
            icon_size_px=settings.icon_size,
            highlight_elite=settings.highlight_elite,
        )

    def is_selected(self, player_id: str) -> bool:
        return self.selected_player_id is not None and self.selected_player_id == player_id

    def is_hovered(self, player_id: str) -> bool:
        return self.hovered_player_id is not None and self.hovered_player_id == player_id

    # Selection

    def toggle_selection(self, player_id: str) -> "InteractionState":
        """Select ``player_id``, or deselect it when it is already selected."""

        if self.selected_player_id == player_id:
            return replace(self, selected_player_id=None)
        return replace(self, selected_player_id=player_id)

    def clear_selection(self) -> "InteractionState":
        return replace(self, selected_player_id=None)

    # Hover

    def pointer_enter(self, player_id: str) -> "InteractionState":
        if not self.label_mode.tracks_hover:
            return self
        return replace(self, hovered_player_id=player_id)

    def pointer_leave(self, player_id: Optional[str] = None) -> "InteractionState":
        if not self.label_mode.tracks_hover:
            return self
        if player_id is not None and self.hovered_player_id != player_id:
            return self
        return replace(self, hovered_player_id=None)

    def clear_hover(self) -> "InteractionState":
        return replace(self, hovered_player_id=None)

    # Controls

    def with_label_mode(self, mode: LabelMode | str) -> "InteractionState":
        return replace(self, label_mode=LabelMode(mode))

    def with_show_labels(self, show: bool) -> "InteractionState":
        return replace(self, show_labels=bool(show))

    def with_highlight_elite(self, highlight: bool) -> "InteractionState":
        return replace(self, highlight_elite=bool(highlight))

    def with_label_size(self, size_px: float) -> "InteractionState":
        return replace(self, label_size_px=clamp(size_px, LABEL_SIZE_RANGE))

    def with_icon_size(self, size_px: float) -> "InteractionState":
        return replace(self, icon_size_px=clamp(size_px, ICON_SIZE_RANGE))


__all__ = ["InteractionState"]
