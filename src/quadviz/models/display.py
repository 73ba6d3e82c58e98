"""Enumerations shared by the interaction state and the renderer."""

from __future__ import annotations

from enum import Enum


class LabelMode(str, Enum):
    ALL = "all"
    SELECTED_ONLY = "selected"
    INITIALS = "initials"
    ELITE_ONLY = "elite"
    HOVER_ONLY = "hover"

    @property
    def display_label(self) -> str:
        return _LABEL_MODE_TITLES[self]

    @property
    def tracks_hover(self) -> bool:
        """Only these modes react to pointer enter/leave."""

        return self in (LabelMode.HOVER_ONLY, LabelMode.INITIALS)


_LABEL_MODE_TITLES = {
    LabelMode.ALL: "All Names",
    LabelMode.SELECTED_ONLY: "Selected Only",
    LabelMode.INITIALS: "Initials",
    LabelMode.ELITE_ONLY: "Elite Only",
    LabelMode.HOVER_ONLY: "Hover Only",
}


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
