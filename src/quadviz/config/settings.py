"""Environment-driven defaults for the chart controls."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Type, TypeVar

from quadviz.models import LabelMode, Theme


logger = logging.getLogger(__name__)

_LABEL_SIZE_ENV = "QUADVIZ_LABEL_SIZE"
_ICON_SIZE_ENV = "QUADVIZ_ICON_SIZE"
_LABEL_MODE_ENV = "QUADVIZ_LABEL_MODE"
_THEME_ENV = "QUADVIZ_THEME"

LABEL_SIZE_RANGE = (8, 16)
ICON_SIZE_RANGE = (3, 12)
_LABEL_SIZE_DEFAULT = 12
_ICON_SIZE_DEFAULT = 6

_E = TypeVar("_E", LabelMode, Theme)


@dataclass(frozen=True)
class DisplaySettings:
    label_size: int = _LABEL_SIZE_DEFAULT
    icon_size: int = _ICON_SIZE_DEFAULT
    label_mode: LabelMode = LabelMode.ALL
    theme: Theme = Theme.LIGHT
    show_labels: bool = True
    highlight_elite: bool = True


def clamp(value: float, bounds: tuple[int, int]) -> float:
    low, high = bounds
    return max(low, min(high, value))


def _env_int(name: str, default: int, bounds: tuple[int, int]) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    return int(clamp(value, bounds))


def _env_choice(name: str, enum_type: Type[_E], default: _E) -> _E:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return enum_type(raw.strip().lower())
    except ValueError:
        logger.warning("Invalid value for %s: %s; using default %s", name, raw, default.value)
        return default


def load_display_settings() -> DisplaySettings:
    """Read chart control defaults from the environment."""

    return DisplaySettings(
        label_size=_env_int(_LABEL_SIZE_ENV, _LABEL_SIZE_DEFAULT, LABEL_SIZE_RANGE),
        icon_size=_env_int(_ICON_SIZE_ENV, _ICON_SIZE_DEFAULT, ICON_SIZE_RANGE),
        label_mode=_env_choice(_LABEL_MODE_ENV, LabelMode, LabelMode.ALL),
        theme=_env_choice(_THEME_ENV, Theme, Theme.LIGHT),
    )
