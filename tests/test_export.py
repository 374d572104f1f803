import math
from pathlib import Path

from pystandings.ingest import parse_standings
from pystandings.view import format_value, serialize_records, sort_records, write_standings_csv


HEADER = "Rank,Player,Rating_Mu,Rating_Sigma,Wins,Draws,Losses,Games,Win_Rate"


def _sample_text() -> str:
    return (
        f"{HEADER}\n"
        "1,Alice,25.0,2.0,8,1,1,10,0.8\n"
        "2,Bob,22.53,2.5,5,0,5,10,0.5\n"
    )


def test_serialize_writes_fixed_header_and_rows():
    text = serialize_records(parse_standings(_sample_text()))

    assert text == (
        f"{HEADER}\n"
        "1,Alice,25,2,8,1,1,10,0.8\n"
        "2,Bob,22.53,2.5,5,0,5,10,0.5"
    )


def test_round_trip_preserves_header_and_records():
    records = parse_standings(_sample_text())

    text = serialize_records(records)
    assert text.splitlines()[0] == HEADER
    assert parse_standings(text) == records


def test_serialize_follows_given_order():
    records = sort_records(parse_standings(_sample_text()), "Player", ascending=False)

    lines = serialize_records(records).splitlines()
    assert lines[1].split(",")[1] == "Bob"
    assert lines[2].split(",")[1] == "Alice"


def test_serialize_empty_sequence_is_header_only():
    assert serialize_records([]) == HEADER


def test_serialize_drops_extra_columns_and_marks_invalid_numbers():
    records = parse_standings(f"{HEADER},Club\n3,Carol,20,x,5,2,3,10,0.5,Oslo\n4\n")

    lines = serialize_records(records).splitlines()
    assert lines[1] == "3,Carol,20,NaN,5,2,3,10,0.5"
    assert lines[2] == "4,,NaN,NaN,NaN,NaN,NaN,NaN,NaN"


def test_delimiter_inside_name_is_not_escaped():
    records = parse_standings(f"{HEADER}\n1,Alice,25,2,8,1,1,10,0.8\n")
    renamed = [records[0].model_copy(update={"name": "Smith, Alice"})]

    text = serialize_records(renamed)
    assert text.splitlines()[1] == "1,Smith, Alice,25,2,8,1,1,10,0.8"
    assert parse_standings(text)[0].name == "Smith"


def test_format_value():
    assert format_value(8.0) == "8"
    assert format_value(0.25) == "0.25"
    assert format_value(math.nan) == "NaN"
    assert format_value(None) == ""
    assert format_value("Bob") == "Bob"


def test_write_standings_csv(tmp_path: Path):
    path = tmp_path / "tournament_results.csv"

    write_standings_csv(path, parse_standings(_sample_text()))
    assert path.read_text(encoding="utf-8").startswith(HEADER + "\n1,Alice,")
