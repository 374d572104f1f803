import math

import pytest

from pystandings.analysis import (
    ParticipantNotFoundError,
    bucket_index,
    compare_players,
    find_record,
    game_totals,
    player_stats,
    rating_curve,
    top_records,
    win_loss_ratio,
    win_rate_histogram,
    win_rate_tier,
)
from pystandings.ingest import parse_standings
from pystandings.models import ParticipantRecord


def _alice_and_bob() -> list[ParticipantRecord]:
    return parse_standings(
        "Rank,Player,Rating_Mu,Rating_Sigma,Wins,Draws,Losses,Games,Win_Rate\n"
        "1,Alice,25.0,2.0,8,1,1,10,0.8\n"
        "2,Bob,22.5,2.5,5,0,5,10,0.5\n"
    )


def _record(name: str, win_rate: float, *, wins: float = 5, losses: float = 5, rating: float = 20.0) -> ParticipantRecord:
    return ParticipantRecord(
        rank=1,
        name=name,
        rating_mean=rating,
        rating_deviation=2.0,
        wins=wins,
        draws=0,
        losses=losses,
        games_played=wins + losses,
        win_rate=win_rate,
    )


def test_totals_for_alice_and_bob():
    totals = game_totals(_alice_and_bob())

    assert (totals.wins, totals.draws, totals.losses) == (13, 1, 6)
    assert totals.games == 20


def test_totals_of_empty_sequence():
    totals = game_totals([])

    assert (totals.wins, totals.draws, totals.losses, totals.games) == (0, 0, 0, 0)


def test_histogram_for_alice_and_bob():
    histogram = win_rate_histogram(_alice_and_bob())

    assert [bucket.label for bucket in histogram.buckets] == ["0-20%", "20-40%", "40-60%", "60-80%", "80-100%"]
    assert histogram.counts == [0, 0, 1, 0, 1]
    assert histogram.invalid == 0


@pytest.mark.parametrize(
    "rate, index",
    [
        (0.0, 0),
        (0.19, 0),
        (0.2, 1),
        (0.4, 2),
        (0.6, 3),
        (0.79, 3),
        (0.8, 4),
        (1.0, 4),
        (-0.5, 0),
        (1.5, 4),
        (math.nan, 0),
    ],
)
def test_bucket_index_boundaries(rate, index):
    assert bucket_index(rate) == index


def test_histogram_counts_sum_to_input_length():
    records = [_record(f"P{i}", rate) for i, rate in enumerate([0.0, 0.2, 0.25, 0.6, 1.0, math.nan, 1.2])]

    histogram = win_rate_histogram(records)
    assert histogram.total == len(records)
    assert histogram.invalid == 1
    assert histogram.counts == [2, 2, 0, 1, 2]


def test_top_records_defaults_to_ten():
    records = [_record(f"P{i}", i / 20) for i in range(12)]

    top = top_records(records)
    assert len(top) == 10
    assert top[0].name == "P11"
    assert top[-1].name == "P2"


def test_top_records_keeps_input_order_on_ties():
    records = [_record("A", 0.5), _record("B", 0.9), _record("C", 0.5), _record("D", 0.5)]

    assert [r.name for r in top_records(records, 3)] == ["B", "A", "C"]
    assert top_records(records, 0) == []
    assert [r.name for r in records] == ["A", "B", "C", "D"]


def test_rating_curve_orders_by_rating_descending():
    records = [_record("Low", 0.1, rating=10.0), _record("High", 0.1, rating=30.0), _record("Mid", 0.1, rating=20.0)]

    curve = rating_curve(records)
    assert [(point.position, point.name, point.rating) for point in curve] == [
        (1, "High", 30.0),
        (2, "Mid", 20.0),
        (3, "Low", 10.0),
    ]


def test_win_rate_tier():
    assert win_rate_tier(0.6) == "high"
    assert win_rate_tier(0.59) == "medium"
    assert win_rate_tier(0.4) == "medium"
    assert win_rate_tier(0.39) == "low"


def test_compare_alice_and_bob():
    result = compare_players(_alice_and_bob(), "Alice", "Bob")

    assert result.a.record.name == "Alice"
    assert result.a.win_loss_ratio == 8
    assert result.b.win_loss_ratio == pytest.approx(1.0)
    assert result.a.win_rate_percent == pytest.approx(80.0)
    assert result.a.tier == "high"
    assert result.b.tier == "medium"
    assert result.a.field_size == 2


def test_compare_is_symmetric():
    records = _alice_and_bob()

    forward = compare_players(records, "Alice", "Bob")
    backward = compare_players(records, "Bob", "Alice")
    assert backward == forward.swapped()


def test_win_loss_ratio_without_losses_is_wins():
    record = _record("Perfect", 1.0, wins=5, losses=0)

    assert win_loss_ratio(record) == 5
    assert not math.isinf(player_stats(record).win_loss_ratio)


def test_compare_reports_missing_side():
    records = _alice_and_bob()

    with pytest.raises(ParticipantNotFoundError) as excinfo:
        compare_players(records, "Alice", "Carol")
    assert excinfo.value.side == "b"
    assert excinfo.value.name == "Carol"

    with pytest.raises(ParticipantNotFoundError) as excinfo:
        compare_players(records, "", "Bob")
    assert excinfo.value.side == "a"


def test_lookup_is_exact_and_returns_first_match():
    records = [_record("Alice", 0.1), _record("Alice", 0.9)]

    assert find_record(records, "Alice").win_rate == pytest.approx(0.1)
    assert find_record(records, "alice") is None
