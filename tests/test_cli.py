from pathlib import Path

import pytest

from quadviz import cli


def _write_dataset(tmp_path: Path) -> Path:
    path = tmp_path / "players.csv"
    path.write_text(
        "id,name,team,position,note,manSeparation,zoneSeparation,avgDepthOfTarget,shortCompletionPct,overallRating\n"
        "wr1,Justin Jefferson,MIN,WR,,3.4,3.3,,,95\n"
        "wr2,CeeDee Lamb,DAL,WR,,2.9,3.1,,,92\n"
        "qb1,Josh Allen,BUF,QB,,,,8.9,74.2,97\n",
        encoding="utf-8",
    )
    return path


def test_cli_writes_chart_and_prints_summary(tmp_path: Path, capsys):
    dataset = _write_dataset(tmp_path)
    output = tmp_path / "chart.html"

    cli.main([str(dataset), "--position", "WR", "--select", "wr2", "--ranking", "--output", str(output)])

    out = capsys.readouterr().out
    assert "2024 WR Performance Quadrant" in out
    assert "Elite players: 1/2" in out
    assert "1\tJustin Jefferson" in out
    assert "2*\tCeeDee Lamb" in out
    assert output.exists()


def test_cli_saves_and_loads_profile(tmp_path: Path, capsys):
    dataset = _write_dataset(tmp_path)
    profile = tmp_path / "profile.json"

    cli.main(
        [
            str(dataset),
            "--position",
            "QB",
            "--column",
            "note=note",
            "--save-profile",
            str(profile),
            "--output",
            str(tmp_path / "qb.html"),
        ]
    )
    cli.main([str(dataset), "--load-profile", str(profile), "--output", str(tmp_path / "wr.html")])

    out = capsys.readouterr().out
    assert "Saved mapping profile" in out
    assert "Comparing Avg. Depth of Target vs. Short Completion %" in out
    assert profile.exists()


def test_cli_reports_empty_position(tmp_path: Path, capsys):
    dataset = _write_dataset(tmp_path)

    cli.main([str(dataset), "--position", "TE", "--output", str(tmp_path / "te.html")])

    assert "No plottable players for TE" in capsys.readouterr().out


def test_cli_ignores_sort_metric_from_another_position(tmp_path: Path, capsys):
    dataset = _write_dataset(tmp_path)

    cli.main(
        [
            str(dataset),
            "--position",
            "WR",
            "--ranking",
            "--sort-by",
            "shortCompletionPct",
            "--ascending",
            "--output",
            str(tmp_path / "chart.html"),
        ]
    )

    out = capsys.readouterr().out
    assert "Sorted by overallRating (lowest first)" in out
    assert out.index("CeeDee Lamb") < out.index("Justin Jefferson")


def test_cli_rejects_dataset_that_is_not_utf8(tmp_path: Path):
    dataset = tmp_path / "players.csv"
    dataset.write_bytes(b"\xff\xfeid,name\nwr1,One\n")

    with pytest.raises(SystemExit, match="not valid UTF-8"):
        cli.main([str(dataset), "--output", str(tmp_path / "chart.html")])


def test_cli_label_mode_help_lists_display_names(capsys):
    with pytest.raises(SystemExit):
        cli.main(["--help"])

    out = " ".join(capsys.readouterr().out.split())
    assert "hover (Hover Only)" in out
    assert "initials (Initials)" in out
