"""Single owner of the quadrant chart's interaction state and derived data."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from quadviz.config.positions import (
    Position,
    QuadrantLabels,
    metric_display_name,
    position_label,
)
from quadviz.config.settings import DisplaySettings
from quadviz.ingest import filter_by_position
from quadviz.models import LabelMode, PlayerRecord, Theme

from .analysis import QuadrantAnalysis, analyze, quadrant_labels
from .layout import MarkerSpec, compute_marker
from .metrics import AxisPair, coerce_axes, resolve_axes
from .overlap import CoordinateKey, build_overlap_index
from .state import InteractionState


logger = logging.getLogger(__name__)

StateListener = Callable[[InteractionState], None]


class QuadrantSession:
    """Owns the dataset view, axis selection and ``InteractionState``.

    Chart markers and ranking-table rows both request selection changes
    through this object, so the two entry points stay interchangeable.
    Derived data (medians, elite set, overlap groups) is recomputed only when
    the active player set or the axis pair changes.
    """

    def __init__(
        self,
        players: Sequence[PlayerRecord],
        *,
        position: Union[str, Position] = Position.WR,
        axes: Optional[AxisPair] = None,
        settings: Optional[DisplaySettings] = None,
    ) -> None:
        settings = settings or DisplaySettings()
        self._dataset: Tuple[PlayerRecord, ...] = tuple(players)
        self._position_label = position_label(position)
        self.position = Position.parse(position)
        if axes is None:
            axes = resolve_axes(self.position)
        self._axes: AxisPair = axes
        self.theme = settings.theme
        self.state = InteractionState.from_settings(settings)
        self._listeners: List[StateListener] = []
        self._active: Tuple[PlayerRecord, ...] = self._filter_active()
        self._generation = 0
        self._cache_key: Optional[Tuple[int, str, str]] = None
        self._analysis: Optional[QuadrantAnalysis] = None
        self._overlap: Dict[CoordinateKey, List[str]] = {}

    # Inputs

    @property
    def x_metric(self) -> str:
        return self._axes[0]

    @property
    def y_metric(self) -> str:
        return self._axes[1]

    @property
    def position_label(self) -> str:
        return self._position_label

    @property
    def players(self) -> Tuple[PlayerRecord, ...]:
        """Players of the tracked position, in dataset order."""

        return self._active

    def _filter_active(self) -> Tuple[PlayerRecord, ...]:
        return tuple(filter_by_position(self._dataset, self._position_label))

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def _commit(self, state: InteractionState) -> InteractionState:
        if state is not self.state:
            self.state = state
            for listener in self._listeners:
                listener(state)
        return self.state

    # Derived data

    def _ensure_derived(self) -> None:
        key = (self._generation, self.x_metric, self.y_metric)
        if key == self._cache_key and self._analysis is not None:
            return
        logger.debug(
            "Recomputing quadrant data for %s (%d players) on %s/%s",
            self._position_label,
            len(self._active),
            self.x_metric,
            self.y_metric,
        )
        self._analysis = analyze(self._active, self.x_metric, self.y_metric)
        self._overlap = build_overlap_index(self._active, self.x_metric, self.y_metric)
        self._cache_key = key

    @property
    def analysis(self) -> QuadrantAnalysis:
        self._ensure_derived()
        assert self._analysis is not None
        return self._analysis

    @property
    def overlap_index(self) -> Dict[CoordinateKey, List[str]]:
        self._ensure_derived()
        return self._overlap

    def quadrant_labels(self) -> QuadrantLabels:
        return quadrant_labels(self.position, self.x_metric, self.y_metric)

    def title(self) -> str:
        return f"2024 {self._position_label} Performance Quadrant"

    def description(self) -> str:
        return (
            f"Comparing {metric_display_name(self.x_metric)} vs. "
            f"{metric_display_name(self.y_metric)}"
        )

    def markers(self) -> List[MarkerSpec]:
        """Draw directives for every player in the active set."""

        analysis = self.analysis
        overlap = self.overlap_index
        return [
            compute_marker(
                player,
                self.state,
                overlap,
                analysis,
                x_metric=self.x_metric,
                y_metric=self.y_metric,
                theme=self.theme,
            )
            for player in self._active
        ]

    # Upstream changes

    def change_position(self, position: Union[str, Position]) -> AxisPair:
        """Track a new position: selection is cleared and axes re-resolved."""

        self._position_label = position_label(position)
        self.position = Position.parse(position)
        self._active = self._filter_active()
        self._generation += 1
        self._axes = resolve_axes(self.position, *self._axes)
        state = self.state.clear_selection()
        active_ids = {player.player_id for player in self._active}
        if state.hovered_player_id is not None and state.hovered_player_id not in active_ids:
            state = state.clear_hover()
        self._commit(state)
        return self._axes

    def set_players(self, players: Sequence[PlayerRecord]) -> None:
        """Replace the upstream dataset; a hover on a vanished player is dropped."""

        self._dataset = tuple(players)
        self._active = self._filter_active()
        self._generation += 1
        active_ids = {player.player_id for player in self._active}
        if self.state.hovered_player_id is not None and self.state.hovered_player_id not in active_ids:
            self._commit(self.state.clear_hover())

    def change_axes(self, x_metric: str, y_metric: str) -> AxisPair:
        """Switch axis metrics; the current selection is kept."""

        self._axes = coerce_axes(self.position, x_metric, y_metric, self._axes)
        return self._axes

    # User events

    def click_marker(self, player_id: str) -> InteractionState:
        return self._commit(self.state.toggle_selection(player_id))

    def click_row(self, player_id: str) -> InteractionState:
        return self._commit(self.state.toggle_selection(player_id))

    def click_background(self) -> InteractionState:
        return self._commit(self.state.clear_selection())

    def hover(self, player_id: str) -> InteractionState:
        return self._commit(self.state.pointer_enter(player_id))

    def leave(self, player_id: Optional[str] = None) -> InteractionState:
        return self._commit(self.state.pointer_leave(player_id))

    def set_label_mode(self, mode: Union[LabelMode, str]) -> InteractionState:
        return self._commit(self.state.with_label_mode(mode))

    def set_show_labels(self, show: bool) -> InteractionState:
        return self._commit(self.state.with_show_labels(show))

    def set_highlight_elite(self, highlight: bool) -> InteractionState:
        return self._commit(self.state.with_highlight_elite(highlight))

    def set_label_size(self, size_px: float) -> InteractionState:
        return self._commit(self.state.with_label_size(size_px))

    def set_icon_size(self, size_px: float) -> InteractionState:
        return self._commit(self.state.with_icon_size(size_px))

    def set_theme(self, theme: Union[Theme, str]) -> None:
        self.theme = Theme(theme)


__all__ = ["QuadrantSession", "StateListener"]
