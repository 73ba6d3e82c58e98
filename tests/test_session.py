from quadviz.models import LabelMode, PlayerRecord
from quadviz.quadrant import QuadrantSession


def _dataset() -> list[PlayerRecord]:
    return [
        PlayerRecord(
            player_id="wr1",
            name="Justin Jefferson",
            team="MIN",
            position="WR",
            metrics={"manSeparation": 3.4, "zoneSeparation": 3.1, "catchRate": 70.0},
        ),
        PlayerRecord(
            player_id="wr2",
            name="CeeDee Lamb",
            team="DAL",
            position="WR",
            metrics={"manSeparation": 2.9, "zoneSeparation": 3.3, "catchRate": 68.0},
        ),
        PlayerRecord(
            player_id="wr3",
            name="Puka Nacua",
            team="LAR",
            position="WR",
            metrics={"manSeparation": 2.5, "zoneSeparation": 2.8, "catchRate": 74.0},
        ),
        PlayerRecord(
            player_id="qb1",
            name="Josh Allen",
            team="BUF",
            position="QB",
            metrics={"avgDepthOfTarget": 8.9, "shortCompletionPct": 74.2},
        ),
    ]


def test_session_filters_active_position_and_default_axes():
    session = QuadrantSession(_dataset(), position="WR")

    assert [player.player_id for player in session.players] == ["wr1", "wr2", "wr3"]
    assert (session.x_metric, session.y_metric) == ("manSeparation", "zoneSeparation")
    assert session.title() == "2024 WR Performance Quadrant"
    assert session.description() == (
        "Comparing Separation vs. Man Coverage vs. Separation vs. Zone Coverage"
    )


def test_marker_and_row_clicks_are_interchangeable():
    session = QuadrantSession(_dataset(), position="WR")

    session.click_marker("wr1")
    assert session.state.selected_player_id == "wr1"

    session.click_row("wr1")
    assert session.state.selected_player_id is None

    session.click_row("wr2")
    session.click_background()
    assert session.state.selected_player_id is None


def test_position_change_clears_selection_and_resets_axes():
    session = QuadrantSession(_dataset(), position="WR")
    session.click_marker("wr1")

    axes = session.change_position("QB")

    assert session.state.selected_player_id is None
    assert axes == ("avgDepthOfTarget", "shortCompletionPct")
    assert [player.player_id for player in session.players] == ["qb1"]


def test_axis_change_keeps_selection_and_recomputes():
    session = QuadrantSession(_dataset(), position="WR")
    session.click_marker("wr3")
    before = session.analysis

    session.change_axes("catchRate", "zoneSeparation")

    assert session.state.selected_player_id == "wr3"
    after = session.analysis
    assert after is not before
    assert after.stats.x_median == 70.0


def test_derived_data_memoized_between_renders():
    session = QuadrantSession(_dataset(), position="WR")

    first = session.analysis
    session.click_marker("wr1")
    session.set_label_mode(LabelMode.INITIALS)

    assert session.analysis is first
    assert session.overlap_index is session.overlap_index


def test_hover_cleared_when_player_leaves_active_set():
    session = QuadrantSession(_dataset(), position="WR")
    session.set_label_mode(LabelMode.HOVER_ONLY)
    session.hover("wr2")
    assert session.state.hovered_player_id == "wr2"

    session.change_position("QB")

    assert session.state.hovered_player_id is None


def test_listeners_receive_every_transition():
    session = QuadrantSession(_dataset(), position="WR")
    seen = []
    session.subscribe(lambda state: seen.append(state.selected_player_id))

    session.click_marker("wr1")
    session.click_marker("wr1")
    session.hover("wr1")  # inert under All mode

    assert seen == ["wr1", None]


def test_other_position_keeps_previous_axes():
    dataset = _dataset() + [
        PlayerRecord(player_id="k1", name="Kicker", position="K", metrics={"catchRate": 1.0, "zoneSeparation": 2.0})
    ]
    session = QuadrantSession(dataset, position="WR")
    session.change_axes("catchRate", "zoneSeparation")

    axes = session.change_position("K")

    assert axes == ("catchRate", "zoneSeparation")
    assert session.position_label == "K"
    assert [player.player_id for player in session.players] == ["k1"]


def test_markers_cover_every_active_player():
    session = QuadrantSession(_dataset(), position="WR")
    session.click_marker("wr2")

    markers = session.markers()

    assert [marker.player_id for marker in markers] == ["wr1", "wr2", "wr3"]
    assert [marker.selected for marker in markers] == [False, True, False]


def test_empty_position_is_safe():
    session = QuadrantSession(_dataset(), position="TE")

    assert session.players == ()
    assert session.markers() == []
    assert not session.analysis.stats.has_reference_lines


def test_position_text_is_normalised_before_filtering():
    session = QuadrantSession(_dataset(), position="wr ")

    assert session.position_label == "WR"
    assert [player.player_id for player in session.players] == ["wr1", "wr2", "wr3"]

    session.change_position(" qb")

    assert [player.player_id for player in session.players] == ["qb1"]
    assert session.title() == "2024 QB Performance Quadrant"
