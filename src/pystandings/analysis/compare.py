"""Per-player stat blocks and head-to-head comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Optional, Sequence

from pystandings.models import ParticipantRecord

from .aggregate import WinRateTier, win_rate_tier


Side = Literal["a", "b"]


class ParticipantNotFoundError(LookupError):
    """Raised when a comparison names a player missing from the standings."""

    def __init__(self, name: str | None, side: Side):
        self.name = name
        self.side = side
        super().__init__(f"No player named {name!r} (side {side})")


@dataclass(frozen=True)
class PlayerStats:
    record: ParticipantRecord
    win_loss_ratio: float
    win_rate_percent: float
    tier: WinRateTier
    field_size: Optional[int] = None


@dataclass(frozen=True)
class ComparisonResult:
    a: PlayerStats
    b: PlayerStats

    def swapped(self) -> "ComparisonResult":
        return ComparisonResult(a=self.b, b=self.a)


def win_loss_ratio(record: ParticipantRecord) -> float:
    """``wins / losses``, or plain ``wins`` when there are no losses."""

    if record.losses > 0:
        return record.wins / record.losses
    return record.wins


def player_stats(record: ParticipantRecord, *, field_size: int | None = None) -> PlayerStats:
    return PlayerStats(
        record=record,
        win_loss_ratio=win_loss_ratio(record),
        win_rate_percent=record.win_rate * 100,
        tier=win_rate_tier(record.win_rate),
        field_size=field_size,
    )


def find_record(records: Iterable[ParticipantRecord], name: str | None) -> ParticipantRecord | None:
    if not name:
        return None
    for record in records:
        if record.name == name:
            return record
    return None


def compare_players(
    records: Sequence[ParticipantRecord],
    name_a: str | None,
    name_b: str | None,
) -> ComparisonResult:
    """Pair the stat blocks of two players looked up by exact name.

    Raises :class:`ParticipantNotFoundError` for the first name (``a`` before
    ``b``) that has no record.
    """

    record_a = find_record(records, name_a)
    if record_a is None:
        raise ParticipantNotFoundError(name_a, "a")
    record_b = find_record(records, name_b)
    if record_b is None:
        raise ParticipantNotFoundError(name_b, "b")
    field_size = len(records)
    return ComparisonResult(
        a=player_stats(record_a, field_size=field_size),
        b=player_stats(record_b, field_size=field_size),
    )


__all__ = [
    "ComparisonResult",
    "ParticipantNotFoundError",
    "PlayerStats",
    "compare_players",
    "find_record",
    "player_stats",
    "win_loss_ratio",
]
