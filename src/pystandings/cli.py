"""Command-line interface for browsing and exporting standings."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Sequence

from pystandings.analysis import (
    ParticipantNotFoundError,
    compare_players,
    game_totals,
    top_records,
    win_rate_histogram,
)
from pystandings.analysis.compare import PlayerStats
from pystandings.config import load_settings
from pystandings.ingest import MalformedFieldError, StandingsLoadError
from pystandings.models import ParticipantRecord
from pystandings.store import StandingsStore
from pystandings.view import SortState, ViewState, format_value, write_standings_csv


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Inspect tournament standings")
    parser.add_argument(
        "source",
        nargs="?",
        default=settings.source,
        help="Standings CSV path or http(s) URL (defaults to PYSTANDINGS_SOURCE)",
    )
    parser.add_argument("--sort", default="rank", help="Column to sort by (e.g., Rank, Player, Win_Rate)")
    parser.add_argument("--descending", action="store_true", help="Sort in descending order")
    parser.add_argument("--search", default="", help="Only show players whose name contains this text")
    parser.add_argument(
        "--top",
        type=int,
        default=None,
        metavar="N",
        help=f"Show the N players with the highest win rate (PYSTANDINGS_TOP_N is {settings.top_n})",
    )
    parser.add_argument("--histogram", action="store_true", help="Show the win rate distribution")
    parser.add_argument("--totals", action="store_true", help="Show total wins, draws and losses")
    parser.add_argument(
        "--compare",
        nargs=2,
        metavar=("PLAYER_A", "PLAYER_B"),
        default=None,
        help="Compare two players by exact name",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write the current view as CSV")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=settings.strict_numeric,
        help="Fail on malformed numeric fields instead of keeping NaN",
    )
    parser.add_argument("--timeout", type=float, default=settings.fetch_timeout, help="Fetch timeout in seconds")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _format_row(record: ParticipantRecord) -> str:
    rate = "-" if "win_rate" in record.invalid_fields else f"{record.win_rate * 100:.1f}%"
    return "{:>5}  {:<24} {:>8} {:>7} {:>4} {:>4} {:>4} {:>5} {:>7}".format(
        format_value(record.rank),
        record.name or "",
        format_value(round(record.rating_mean, 2)),
        format_value(round(record.rating_deviation, 2)),
        format_value(record.wins),
        format_value(record.draws),
        format_value(record.losses),
        format_value(record.games_played),
        rate,
    )


def _print_table(records: Sequence[ParticipantRecord]) -> None:
    print("{:>5}  {:<24} {:>8} {:>7} {:>4} {:>4} {:>4} {:>5} {:>7}".format(
        "Rank", "Player", "Rating", "Sigma", "W", "D", "L", "Games", "Win%",
    ))
    for record in records:
        print(_format_row(record))


def _print_stats(label: str, stats: PlayerStats) -> None:
    record = stats.record
    print(f"{label}: {record.name} (Rank #{format_value(record.rank)} of {stats.field_size})")
    print(f"  Rating (mu)     {record.rating_mean:.2f}")
    print(f"  Wins/Draws/Loss {format_value(record.wins)}/{format_value(record.draws)}/{format_value(record.losses)}")
    print(f"  Win rate        {stats.win_rate_percent:.1f}% ({stats.tier})")
    print(f"  Win/loss ratio  {stats.win_loss_ratio:.2f}")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    store = StandingsStore(strict=args.strict)
    try:
        records = asyncio.run(store.reload(args.source, timeout=args.timeout))
    except StandingsLoadError as exc:
        print(f"Error loading tournament data: {exc}", file=sys.stderr)
        return 1
    except MalformedFieldError as exc:
        print(f"Malformed standings data: {exc}", file=sys.stderr)
        return 1

    view = ViewState(
        sort=SortState(column=args.sort, ascending=not args.descending),
        query=args.search,
    )
    try:
        visible = view.apply(records)
    except KeyError as exc:
        print(f"Cannot sort: {exc.args[0]}", file=sys.stderr)
        return 2

    _print_table(visible)
    print(f"\nShowing {len(visible)} of {len(records)} players")

    if args.histogram:
        print("\nWin rate distribution")
        histogram = win_rate_histogram(records)
        for bucket in histogram.buckets:
            print(f"  {bucket.label:>8}  {bucket.count:>4}  {'#' * bucket.count}")
        if histogram.invalid:
            print(f"  ({histogram.invalid} players without a valid win rate counted in the first bucket)")

    if args.totals:
        totals = game_totals(records)
        print(
            f"\nTotals: wins={format_value(totals.wins)} draws={format_value(totals.draws)} "
            f"losses={format_value(totals.losses)}"
        )

    if args.top is not None:
        print(f"\nTop {args.top} by win rate")
        _print_table(top_records(records, args.top))

    if args.compare:
        print()
        try:
            result = compare_players(records, *args.compare)
        except ParticipantNotFoundError as exc:
            print(f"Select two players to compare ({exc.name!r} not found)", file=sys.stderr)
            return 1
        _print_stats("A", result.a)
        _print_stats("B", result.b)

    if args.output:
        write_standings_csv(args.output, visible)
        print(f"Wrote {len(visible)} players to {args.output}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
