"""Read-only summaries and comparisons over standings records."""

from .aggregate import (
    BUCKET_LABELS,
    GameTotals,
    RatingPoint,
    WinRateBucket,
    WinRateHistogram,
    bucket_index,
    game_totals,
    rating_curve,
    top_records,
    win_rate_histogram,
    win_rate_tier,
)
from .compare import (
    ComparisonResult,
    ParticipantNotFoundError,
    PlayerStats,
    compare_players,
    find_record,
    player_stats,
    win_loss_ratio,
)

__all__ = [
    "BUCKET_LABELS",
    "ComparisonResult",
    "GameTotals",
    "ParticipantNotFoundError",
    "PlayerStats",
    "RatingPoint",
    "WinRateBucket",
    "WinRateHistogram",
    "bucket_index",
    "compare_players",
    "find_record",
    "game_totals",
    "player_stats",
    "rating_curve",
    "top_records",
    "win_loss_ratio",
    "win_rate_histogram",
    "win_rate_tier",
]
