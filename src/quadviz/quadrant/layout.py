"""Per-player marker styling and collision-aware label placement.

``compute_marker`` is a pure function: given a player, the interaction state
and the per-render derived data, it returns a ``MarkerSpec`` that the host
renderer draws as-is. Offsets are in screen pixels relative to the marker
center, with y growing downward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from quadviz.models import LabelMode, PlayerRecord, Theme

from .analysis import QuadrantAnalysis
from .overlap import OverlapIndex, overlap_slot, player_key
from .state import InteractionState


SELECTED_SCALE = 1.67
ELITE_SCALE = 1.33
LABEL_PADDING_PX = 3
HOVER_LABEL_PADDING_PX = 10
FAN_OUT_X_PX = 5
FAN_OUT_Y_PX = 3


@dataclass(frozen=True)
class MarkerStyle:
    fill: str
    stroke: str
    stroke_width: int


SELECTED_STYLE = MarkerStyle(fill="#10b981", stroke="#065f46", stroke_width=2)
ELITE_STYLE = MarkerStyle(fill="#f97316", stroke="#7c2d12", stroke_width=1)
DEFAULT_STYLE = MarkerStyle(fill="#6366f1", stroke="#4338ca", stroke_width=1)


@dataclass(frozen=True)
class ThemePalette:
    label_color: str
    selected_label_color: str
    halo_color: str
    reference_line_color: str


_PALETTES = {
    Theme.LIGHT: ThemePalette(
        label_color="#000000",
        selected_label_color="#065f46",
        halo_color="#ffffff",
        reference_line_color="rgba(100, 100, 100, 0.8)",
    ),
    Theme.DARK: ThemePalette(
        label_color="#f8fafc",
        selected_label_color="#6ee7b7",
        halo_color="#0f172a",
        reference_line_color="rgba(200, 200, 200, 0.8)",
    ),
}


def palette_for(theme: Theme) -> ThemePalette:
    return _PALETTES[Theme(theme)]


@dataclass(frozen=True)
class LabelSpec:
    text: str
    offset_x: float
    offset_y: float
    font_size: float
    bold: bool
    color: str
    halo_color: str
    hover: bool = False


@dataclass(frozen=True)
class MarkerSpec:
    player_id: str
    x: Optional[float]
    y: Optional[float]
    radius: float
    style: MarkerStyle
    selected: bool
    elite: bool
    labels: Tuple[LabelSpec, ...] = ()

    @property
    def plottable(self) -> bool:
        return self.x is not None and self.y is not None


def initials(name: str) -> str:
    """First letter of each space-separated token."""

    return "".join(part[0] for part in name.split(" ") if part)


def marker_radius(state: InteractionState, *, selected: bool, elite: bool) -> float:
    if selected:
        return state.icon_size_px * SELECTED_SCALE
    if elite and state.highlight_elite:
        return state.icon_size_px * ELITE_SCALE
    return state.icon_size_px


def marker_style(state: InteractionState, *, selected: bool, elite: bool) -> MarkerStyle:
    if selected:
        return SELECTED_STYLE
    if elite and state.highlight_elite:
        return ELITE_STYLE
    return DEFAULT_STYLE


def label_visible(state: InteractionState, *, selected: bool, elite: bool) -> bool:
    """Whether the primary (non-hover) label slot is in use for a player."""

    if selected:
        return True
    if not state.show_labels:
        return False
    mode = state.label_mode
    if mode is LabelMode.ALL or mode is LabelMode.INITIALS:
        return True
    if mode is LabelMode.ELITE_ONLY:
        return elite
    return False


def fan_out_offset(position_in_group: int, group_size: int) -> Tuple[float, float]:
    """Extra label offset for the ``i``-th member of a co-located group."""

    if group_size <= 1 or position_in_group <= 0:
        return 0.0, 0.0
    i = position_in_group
    direction = 1 if i % 2 == 0 else -1
    return float(direction * (i + 1) * FAN_OUT_X_PX), float(-i * FAN_OUT_Y_PX)


def compute_marker(
    player: PlayerRecord,
    state: InteractionState,
    overlap_index: OverlapIndex,
    analysis: QuadrantAnalysis,
    *,
    x_metric: str,
    y_metric: str,
    theme: Theme = Theme.LIGHT,
) -> MarkerSpec:
    """Resolve radius, colors and labels for one rendered player."""

    player_id = player.player_id
    selected = state.is_selected(player_id)
    hovered = state.is_hovered(player_id)
    elite = analysis.is_elite(player_id)
    radius = marker_radius(state, selected=selected, elite=elite)
    palette = palette_for(theme)

    label_x = 0.0
    label_y = -(radius + LABEL_PADDING_PX)
    visible = label_visible(state, selected=selected, elite=elite)
    if visible:
        key = player_key(player, x_metric, y_metric)
        dx, dy = fan_out_offset(*overlap_slot(overlap_index, key, player_id))
        label_x += dx
        label_y += dy

    font_size = state.label_size_px + 1 if selected else state.label_size_px
    color = palette.selected_label_color if selected else palette.label_color
    initials_mode = state.label_mode is LabelMode.INITIALS

    labels = []
    # A hovered player under initials mode swaps its initials for the hover label.
    if visible and not (initials_mode and hovered and not selected):
        text = initials(player.name) if initials_mode and not selected else player.name
        labels.append(
            LabelSpec(
                text=text,
                offset_x=label_x,
                offset_y=label_y,
                font_size=font_size,
                bold=selected or (elite and state.highlight_elite),
                color=color,
                halo_color=palette.halo_color,
            )
        )

    hover_mode = state.label_mode is LabelMode.HOVER_ONLY or (initials_mode and not selected)
    if hovered and hover_mode:
        labels.append(
            LabelSpec(
                text=player.name,
                offset_x=label_x,
                offset_y=-(radius + HOVER_LABEL_PADDING_PX),
                font_size=font_size,
                bold=True,
                color=color,
                halo_color=palette.halo_color,
                hover=True,
            )
        )

    return MarkerSpec(
        player_id=player_id,
        x=player.metric(x_metric),
        y=player.metric(y_metric),
        radius=radius,
        style=marker_style(state, selected=selected, elite=elite),
        selected=selected,
        elite=elite,
        labels=tuple(labels),
    )


__all__ = [
    "DEFAULT_STYLE",
    "ELITE_STYLE",
    "SELECTED_STYLE",
    "LabelSpec",
    "MarkerSpec",
    "MarkerStyle",
    "ThemePalette",
    "compute_marker",
    "fan_out_offset",
    "initials",
    "label_visible",
    "marker_radius",
    "marker_style",
    "palette_for",
]
