from quadviz.models import PlayerRecord
from quadviz.table import (
    RankingCriteria,
    coerce_sort_metric,
    column_headers,
    format_metric_value,
    rank_players,
    render_table,
    toggle_sort,
)


def _players() -> list[PlayerRecord]:
    return [
        PlayerRecord(player_id="a", name="Justin Jefferson", team="MIN", metrics={"overallRating": 95}),
        PlayerRecord(player_id="b", name="CeeDee Lamb", team="DAL", metrics={"overallRating": 92}),
        PlayerRecord(player_id="c", name="Jordan Addison", team="MIN", metrics={}),
        PlayerRecord(player_id="d", name="Puka Nacua", team="LAR", metrics={"overallRating": 97}),
    ]


def test_rank_players_sorts_descending_with_missing_last():
    ranked = rank_players(_players(), RankingCriteria())

    assert [item.player.player_id for item in ranked] == ["d", "a", "b", "c"]
    assert [item.rank for item in ranked] == [1, 2, 3, 4]


def test_rank_players_ascending_keeps_missing_last():
    ranked = rank_players(_players(), RankingCriteria(sort_direction="asc"))

    assert [item.player.player_id for item in ranked] == ["b", "a", "d", "c"]


def test_search_matches_name_or_team_case_insensitive():
    ranked = rank_players(_players(), RankingCriteria(search_query="min"))
    assert {item.player.player_id for item in ranked} == {"a", "c"}

    ranked = rank_players(_players(), RankingCriteria(search_query="lamb"))
    assert [item.player.player_id for item in ranked] == ["b"]


def test_selected_row_flagged():
    ranked = rank_players(_players(), RankingCriteria(), selected_player_id="b")

    assert [item.selected for item in ranked] == [False, False, True, False]


def test_toggle_sort():
    criteria = RankingCriteria()

    flipped = toggle_sort(criteria, "overallRating")
    assert flipped.sort_direction == "asc"

    switched = toggle_sort(flipped, "catchRate")
    assert switched.sort_metric == "catchRate"
    assert switched.sort_direction == "desc"


def test_format_metric_value():
    assert format_metric_value(None, "catchRate") == "N/A"
    assert format_metric_value(68.24, "catchRate") == "68.2%"
    assert format_metric_value(12.6, "redZoneTargets") == "13"
    assert format_metric_value(3.14159, "manSeparation") == "3.14"


def test_column_headers_by_position():
    qb = column_headers("QB", "avgDepthOfTarget", "shortCompletionPct")
    assert [c.label for c in qb] == [
        "Avg. DepthTarget",
        "Short %",
        "Mid %",
        "Long %",
        "Rush YPA",
        "Rush TD",
        "Rating",
    ]

    wr = column_headers("WR", "manSeparation", "catchRate")
    assert [c.key for c in wr] == [
        "manSeparation",
        "catchRate",
        "yardsPerRoute",
        "targetShare",
        "overallRating",
    ]
    assert wr[0].label == "Man"


def test_render_table_marks_selected_row():
    text = render_table(
        _players(),
        RankingCriteria(),
        column_headers("WR", "manSeparation", "zoneSeparation"),
        selected_player_id="a",
    )

    lines = text.splitlines()
    assert lines[0].startswith("Rank\tPlayer\tTeam")
    assert lines[2].startswith("2*\tJustin Jefferson\tMIN")
    assert lines[-1].endswith("N/A")


def test_format_metric_value_counts_are_case_sensitive():
    assert format_metric_value(54.0, "receptions") == "54.00"
    assert format_metric_value(54.4, "targetReceptions") == "54"
    assert format_metric_value(7.5, "rushingTouchdowns") == "8"


def test_coerce_sort_metric_falls_back_for_other_positions_metrics(caplog):
    with caplog.at_level("WARNING"):
        assert coerce_sort_metric("WR", "rushTdPct") == "overallRating"

    assert "rushTdPct" in caplog.text
    assert coerce_sort_metric("WR", "catchRate") == "catchRate"
    assert coerce_sort_metric("K", "anything") == "anything"
    assert coerce_sort_metric("QB", None) == "overallRating"
