"""Command-line interface for rendering quadrant charts from a player dataset."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from quadviz.config import load_display_settings, metric_display_name
from quadviz.config_loader import MappingProfile
from quadviz.ingest import DatasetError, load_players
from quadviz.models import LabelMode, PlayerRecord, Theme
from quadviz.quadrant import QuadrantSession, resolve_axes
from quadviz.render import write_quadrant_html
from quadviz.table import RankingCriteria, coerce_sort_metric, column_headers, render_table


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a player performance quadrant chart")
    parser.add_argument("dataset", type=Path, help="Path to a players CSV or JSON file")
    parser.add_argument("--position", default="WR", help="Position to plot (QB, RB, WR, TE, ...)")
    parser.add_argument("--x-metric", default=None, help="Metric for the horizontal axis")
    parser.add_argument("--y-metric", default=None, help="Metric for the vertical axis")
    parser.add_argument(
        "--label-mode",
        choices=[mode.value for mode in LabelMode],
        default=None,
        help="Which players get name labels: "
        + ", ".join(f"{mode.value} ({mode.display_label})" for mode in LabelMode),
    )
    parser.add_argument("--select", default=None, help="Player id to select")
    parser.add_argument("--hover", default=None, help="Player id to treat as hovered")
    parser.add_argument("--hide-labels", action="store_true", help="Turn off name labels")
    parser.add_argument("--label-size", type=int, default=None, help="Label font size (8-16)")
    parser.add_argument("--icon-size", type=int, default=None, help="Marker size (3-12)")
    parser.add_argument(
        "--no-highlight-elite",
        action="store_true",
        help="Do not enlarge or recolor elite players",
    )
    parser.add_argument("--theme", choices=[theme.value for theme in Theme], default=None)
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for identity columns (e.g., name=First Name|Last Name)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--output", type=Path, default=Path("quadrant.html"), help="Output HTML path")
    parser.add_argument("--ranking", action="store_true", help="Print the ranking table")
    parser.add_argument("--sort-by", default=None, help="Ranking sort metric")
    parser.add_argument("--ascending", action="store_true", help="Sort the ranking lowest first")
    parser.add_argument("--search", default="", help="Filter the ranking by name or team")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def build_session(args: argparse.Namespace, players: Sequence[PlayerRecord]) -> QuadrantSession:
    settings = load_display_settings()
    session = QuadrantSession(players, position=args.position, settings=settings)
    default_x, default_y = resolve_axes(session.position)
    if args.x_metric or args.y_metric:
        session.change_axes(args.x_metric or default_x, args.y_metric or default_y)

    if args.theme:
        session.set_theme(args.theme)
    if args.label_mode:
        session.set_label_mode(args.label_mode)
    if args.hide_labels:
        session.set_show_labels(False)
    if args.no_highlight_elite:
        session.set_highlight_elite(False)
    if args.label_size is not None:
        session.set_label_size(args.label_size)
    if args.icon_size is not None:
        session.set_icon_size(args.icon_size)
    if args.select:
        session.click_marker(args.select)
    if args.hover:
        session.hover(args.hover)
    return session


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mapping = _parse_mapping(args.column)
    if args.load_profile:
        profile = MappingProfile.load(args.load_profile)
        mapping = profile.columns | mapping

    try:
        players = load_players(args.dataset, mapping=mapping or None)
    except (DatasetError, OSError) as exc:
        raise SystemExit(f"Unable to load {args.dataset}: {exc}") from exc

    if args.save_profile:
        MappingProfile(mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    session = build_session(args, players)
    stats = session.analysis.stats
    print(session.title())
    print(session.description())
    if stats.has_reference_lines:
        print(
            f"Medians: {metric_display_name(session.x_metric)}={stats.x_median:.2f}, "
            f"{metric_display_name(session.y_metric)}={stats.y_median:.2f}"
        )
        print(f"Elite players: {len(session.analysis.elite_ids)}/{stats.sample_size}")
    else:
        print(f"No plottable players for {session.position_label}")

    if args.ranking:
        criteria = RankingCriteria(
            search_query=args.search,
            sort_metric=coerce_sort_metric(session.position, args.sort_by),
            sort_direction="asc" if args.ascending else "desc",
        )
        columns = column_headers(session.position, session.x_metric, session.y_metric)
        print(criteria.describe())
        print(
            render_table(
                session.players,
                criteria,
                columns,
                selected_player_id=session.state.selected_player_id,
            )
        )

    write_quadrant_html(session, args.output)
    print(f"Wrote chart to {args.output}")


if __name__ == "__main__":
    main()
