import math

import pytest
from pydantic import ValidationError

from quadviz.models import PlayerRecord


def test_player_record_is_frozen():
    record = PlayerRecord(
        player_id="wr1",
        name="Justin Jefferson",
        team="MIN",
        position="WR",
        metrics={"manSeparation": 3.4},
    )

    assert record.metric("manSeparation") == pytest.approx(3.4)

    with pytest.raises((TypeError, ValidationError)):
        record.player_id = "wr2"  # type: ignore[misc]


def test_metric_hides_missing_and_non_finite_values():
    record = PlayerRecord(
        player_id="wr1",
        name="Test",
        metrics={"a": math.nan, "b": math.inf, "c": 1.5},
    )

    assert record.metric("a") is None
    assert record.metric("b") is None
    assert record.metric("missing") is None
    assert record.metric("c") == 1.5


def test_player_id_required():
    with pytest.raises(ValidationError):
        PlayerRecord(player_id="", name="Nobody")
