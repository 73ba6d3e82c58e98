"""Per-position metric catalogs, default axes and quadrant naming."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple, Union


OVERALL_RATING = "overallRating"


class Position(str, Enum):
    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: Union[str, "Position", None]) -> "Position":
        """Map a raw position string onto a variant; unknown values become OTHER."""

        if isinstance(value, Position):
            return value
        text = (value or "").strip().upper()
        try:
            return cls(text)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class MetricOption:
    key: str
    label: str


@dataclass(frozen=True)
class QuadrantLabels:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


GENERIC_QUADRANT_LABELS = QuadrantLabels(
    top_left="High Y, Low X",
    top_right="High Y, High X",
    bottom_left="Low Y, Low X",
    bottom_right="Low Y, High X",
)


@dataclass(frozen=True)
class PositionCatalog:
    position: Position
    metrics: Tuple[MetricOption, ...]
    default_axes: Optional[Tuple[str, str]]
    quadrant_labels: Mapping[Tuple[str, str], QuadrantLabels] = field(default_factory=dict)
    table_columns: Tuple[MetricOption, ...] = ()

    def metric_keys(self) -> Tuple[str, ...]:
        return tuple(option.key for option in self.metrics)

    def accepts(self, metric: str) -> bool:
        """OTHER accepts any metric; known positions only their own catalog."""

        if self.position is Position.OTHER:
            return True
        return metric in self.metric_keys()


_METRIC_NAMES: Dict[str, str] = {
    # WR
    "manSeparation": "Separation vs. Man Coverage",
    "zoneSeparation": "Separation vs. Zone Coverage",
    "catchRate": "Catch Rate",
    "yardsPerRoute": "Yards Per Route Run",
    "targetShare": "Target Share %",
    "redZoneTargets": "Red Zone Targets",
    # QB
    "avgDepthOfTarget": "Avg. Depth of Target",
    "shortCompletionPct": "Short Completion %",
    "intermediateCompletionPct": "Intermediate Completion %",
    "longCompletionPct": "Long Completion %",
    "rushYardsPerAttempt": "Rush Yards Per Attempt",
    "rushTdPct": "Rush TD %",
    # RB
    "yardsPerCarry": "Yards Per Carry",
    "receptions": "Receptions",
    OVERALL_RATING: "Overall Rating",
}


_DEFAULT_COLUMNS: Tuple[MetricOption, ...] = (
    MetricOption("catchRate", "Catch %"),
    MetricOption("yardsPerRoute", "YPR"),
    MetricOption("targetShare", "Target %"),
)


_QB_CATALOG = PositionCatalog(
    position=Position.QB,
    metrics=(
        MetricOption("avgDepthOfTarget", "Avg. Depth of Target"),
        MetricOption("shortCompletionPct", "Short Completion %"),
        MetricOption("intermediateCompletionPct", "Intermediate Completion %"),
        MetricOption("longCompletionPct", "Long Completion %"),
        MetricOption("rushYardsPerAttempt", "Rush Yards Per Attempt"),
        MetricOption("rushTdPct", "Rush TD %"),
        MetricOption(OVERALL_RATING, "Overall Rating"),
    ),
    default_axes=("avgDepthOfTarget", "shortCompletionPct"),
    quadrant_labels={
        ("avgDepthOfTarget", "shortCompletionPct"): QuadrantLabels(
            top_left="Short Game Specialists",
            top_right="Balanced Passers",
            bottom_left="Limited Passers",
            bottom_right="Deep Ball Specialists",
        ),
        ("rushYardsPerAttempt", "rushTdPct"): QuadrantLabels(
            top_left="Goal Line Rushers",
            top_right="Dual Threats",
            bottom_left="Pocket Passers",
            bottom_right="Scrambling QBs",
        ),
    },
    table_columns=(
        MetricOption("avgDepthOfTarget", "Avg. DepthTarget"),
        MetricOption("shortCompletionPct", "Short %"),
        MetricOption("intermediateCompletionPct", "Mid %"),
        MetricOption("longCompletionPct", "Long %"),
        MetricOption("rushYardsPerAttempt", "Rush YPA"),
        MetricOption("rushTdPct", "Rush TD"),
    ),
)

_WR_CATALOG = PositionCatalog(
    position=Position.WR,
    metrics=(
        MetricOption("manSeparation", "Man Separation"),
        MetricOption("zoneSeparation", "Zone Separation"),
        MetricOption("catchRate", "Catch Rate"),
        MetricOption("yardsPerRoute", "Yards Per Route"),
        MetricOption("targetShare", "Target Share %"),
        MetricOption("redZoneTargets", "Red Zone Targets"),
        MetricOption(OVERALL_RATING, "Overall Rating"),
    ),
    default_axes=("manSeparation", "zoneSeparation"),
    quadrant_labels={
        ("manSeparation", "zoneSeparation"): QuadrantLabels(
            top_left="Zone Beaters",
            top_right="Elite Separators",
            bottom_left="Contested Catchers",
            bottom_right="Man Beaters",
        ),
    },
    table_columns=_DEFAULT_COLUMNS,
)

_RB_CATALOG = PositionCatalog(
    position=Position.RB,
    metrics=(
        MetricOption("yardsPerCarry", "Yards Per Carry"),
        MetricOption("receptions", "Receptions"),
        MetricOption(OVERALL_RATING, "Overall Rating"),
    ),
    default_axes=("yardsPerCarry", "receptions"),
    table_columns=(
        MetricOption("yardsPerCarry", "YPC"),
        MetricOption("receptions", "Rec"),
    ),
)

_TE_CATALOG = PositionCatalog(
    position=Position.TE,
    metrics=(
        MetricOption("catchRate", "Catch Rate"),
        MetricOption("redZoneTargets", "Red Zone Targets"),
        MetricOption("yardsPerRoute", "Yards Per Route"),
        MetricOption("targetShare", "Target Share %"),
        MetricOption(OVERALL_RATING, "Overall Rating"),
    ),
    default_axes=("catchRate", "redZoneTargets"),
    table_columns=_DEFAULT_COLUMNS,
)

_OTHER_CATALOG = PositionCatalog(
    position=Position.OTHER,
    metrics=(MetricOption(OVERALL_RATING, "Overall Rating"),),
    default_axes=None,
    table_columns=_DEFAULT_COLUMNS,
)


def position_label(position: Union[str, Position, None]) -> str:
    """Normalised position text used to match player records."""

    return str(getattr(position, "value", position) or "").strip().upper()


def get_catalog(position: Union[str, Position, None]) -> PositionCatalog:
    """Resolve the catalog for a position; unknown positions map to OTHER."""

    match Position.parse(position):
        case Position.QB:
            return _QB_CATALOG
        case Position.RB:
            return _RB_CATALOG
        case Position.WR:
            return _WR_CATALOG
        case Position.TE:
            return _TE_CATALOG
        case Position.OTHER:
            return _OTHER_CATALOG
    raise KeyError(f"No catalog configured for position={position!r}")


def metric_display_name(metric: str) -> str:
    """Human-readable metric name; unknown keys are returned unchanged."""

    return _METRIC_NAMES.get(metric, metric)
