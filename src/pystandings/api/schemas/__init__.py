"""Pydantic models for API I/O."""

from .standings import (
    LoadResponse,
    ParticipantResponse,
    SortStatePayload,
    StandingsResponse,
    ToggleSortRequest,
    ViewStatePayload,
)
from .analysis import (
    ComparisonResponse,
    HistogramBucketResponse,
    HistogramResponse,
    PlayerStatsResponse,
    RatingPointResponse,
    TotalsResponse,
)

__all__ = [
    "ComparisonResponse",
    "HistogramBucketResponse",
    "HistogramResponse",
    "LoadResponse",
    "ParticipantResponse",
    "PlayerStatsResponse",
    "RatingPointResponse",
    "SortStatePayload",
    "StandingsResponse",
    "ToggleSortRequest",
    "TotalsResponse",
    "ViewStatePayload",
]
