"""Summaries computed over a full standings sequence."""

from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, List, Literal, Sequence, Tuple

from pystandings.models import ParticipantRecord
from pystandings.view.sorting import sort_records


BUCKET_EDGES: Tuple[float, ...] = (0.0, 0.2, 0.4, 0.6, 0.8, 1.0)
BUCKET_LABELS: Tuple[str, ...] = ("0-20%", "20-40%", "40-60%", "60-80%", "80-100%")

DEFAULT_TOP_N = 10

WinRateTier = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class WinRateBucket:
    label: str
    lower: float
    upper: float
    count: int


@dataclass(frozen=True)
class WinRateHistogram:
    """Bucket counts in fixed order; ``invalid`` records are also counted in the first bucket."""

    buckets: Tuple[WinRateBucket, ...]
    invalid: int

    @property
    def counts(self) -> List[int]:
        return [bucket.count for bucket in self.buckets]

    @property
    def total(self) -> int:
        return sum(self.counts)


@dataclass(frozen=True)
class GameTotals:
    wins: float
    draws: float
    losses: float
    games: float


@dataclass(frozen=True)
class RatingPoint:
    position: int
    name: str | None
    rating: float


def bucket_index(rate: float) -> int:
    """Return the histogram bucket for ``rate``.

    Buckets are lower-inclusive (0.2 falls in the second bucket) and the last
    one also holds 1.0. Out-of-range rates clamp to the nearest end bucket;
    non-finite rates go to the first.
    """

    if not math.isfinite(rate):
        return 0
    index = bisect_right(BUCKET_EDGES, rate) - 1
    return min(max(index, 0), len(BUCKET_LABELS) - 1)


def win_rate_histogram(records: Iterable[ParticipantRecord]) -> WinRateHistogram:
    counts = [0] * len(BUCKET_LABELS)
    invalid = 0
    for record in records:
        if not math.isfinite(record.win_rate):
            invalid += 1
        counts[bucket_index(record.win_rate)] += 1

    buckets = tuple(
        WinRateBucket(
            label=label,
            lower=BUCKET_EDGES[index],
            upper=BUCKET_EDGES[index + 1],
            count=counts[index],
        )
        for index, label in enumerate(BUCKET_LABELS)
    )
    return WinRateHistogram(buckets=buckets, invalid=invalid)


def game_totals(records: Iterable[ParticipantRecord]) -> GameTotals:
    wins = draws = losses = games = 0.0
    for record in records:
        wins += record.wins
        draws += record.draws
        losses += record.losses
        games += record.games_played
    return GameTotals(wins=wins, draws=draws, losses=losses, games=games)


def top_records(
    records: Sequence[ParticipantRecord],
    limit: int | None = None,
    *,
    metric: str = "win_rate",
) -> List[ParticipantRecord]:
    """Return the ``limit`` highest records by ``metric``; ties keep input order."""

    limit = DEFAULT_TOP_N if limit is None else limit
    if limit <= 0:
        return []
    return sort_records(records, metric, ascending=False)[:limit]


def rating_curve(records: Sequence[ParticipantRecord]) -> List[RatingPoint]:
    ordered = sort_records(records, "rating_mean", ascending=False)
    return [
        RatingPoint(position=index, name=record.name, rating=record.rating_mean)
        for index, record in enumerate(ordered, start=1)
    ]


def win_rate_tier(rate: float) -> WinRateTier:
    if rate >= 0.6:
        return "high"
    if rate >= 0.4:
        return "medium"
    return "low"


__all__ = [
    "BUCKET_EDGES",
    "BUCKET_LABELS",
    "DEFAULT_TOP_N",
    "GameTotals",
    "RatingPoint",
    "WinRateBucket",
    "WinRateHistogram",
    "bucket_index",
    "game_totals",
    "rating_curve",
    "top_records",
    "win_rate_histogram",
    "win_rate_tier",
]
