from __future__ import annotations

import math
from typing import List, Optional

from pydantic import BaseModel

from pystandings.analysis import GameTotals, PlayerStats, RatingPoint, WinRateHistogram

from .standings import ParticipantResponse


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


class HistogramBucketResponse(BaseModel):
    label: str
    lower: float
    upper: float
    count: int


class HistogramResponse(BaseModel):
    buckets: List[HistogramBucketResponse]
    invalid: int
    total: int

    @classmethod
    def from_histogram(cls, histogram: WinRateHistogram) -> "HistogramResponse":
        return cls(
            buckets=[
                HistogramBucketResponse(
                    label=bucket.label,
                    lower=bucket.lower,
                    upper=bucket.upper,
                    count=bucket.count,
                )
                for bucket in histogram.buckets
            ],
            invalid=histogram.invalid,
            total=histogram.total,
        )


class TotalsResponse(BaseModel):
    wins: Optional[float]
    draws: Optional[float]
    losses: Optional[float]
    games: Optional[float]

    @classmethod
    def from_totals(cls, totals: GameTotals) -> "TotalsResponse":
        return cls(
            wins=_finite_or_none(totals.wins),
            draws=_finite_or_none(totals.draws),
            losses=_finite_or_none(totals.losses),
            games=_finite_or_none(totals.games),
        )


class RatingPointResponse(BaseModel):
    position: int
    name: Optional[str]
    rating: Optional[float]

    @classmethod
    def from_point(cls, point: RatingPoint) -> "RatingPointResponse":
        return cls(position=point.position, name=point.name, rating=_finite_or_none(point.rating))


class PlayerStatsResponse(BaseModel):
    player: ParticipantResponse
    win_loss_ratio: Optional[float]
    win_rate_percent: Optional[float]
    tier: str
    field_size: Optional[int] = None

    @classmethod
    def from_stats(cls, stats: PlayerStats) -> "PlayerStatsResponse":
        return cls(
            player=ParticipantResponse.from_record(stats.record),
            win_loss_ratio=_finite_or_none(stats.win_loss_ratio),
            win_rate_percent=_finite_or_none(stats.win_rate_percent),
            tier=stats.tier,
            field_size=stats.field_size,
        )


class ComparisonResponse(BaseModel):
    a: PlayerStatsResponse
    b: PlayerStatsResponse
