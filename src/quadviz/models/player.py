"""Canonical player model consumed by the quadrant core."""

from __future__ import annotations

import math
from typing import Dict, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PlayerRecord(BaseModel):
    """Read-only player payload: identity fields plus named numeric metrics."""

    player_id: str = Field(..., min_length=1)
    name: str
    team: str = ""
    position: str = ""
    metrics: Dict[str, float] = Field(default_factory=dict)
    note: str = ""

    model_config = ConfigDict(frozen=True)

    def metric(self, key: str) -> Optional[float]:
        """Return the metric value, or None when it is missing or non-finite."""

        value = self.metrics.get(key)
        if value is None or not math.isfinite(value):
            return None
        return value
