from pathlib import Path

import pytest

from pystandings.cli import main


def _write_sample(tmp_path: Path) -> Path:
    path = tmp_path / "final_standings.csv"
    path.write_text(
        "Rank,Player,Rating_Mu,Rating_Sigma,Wins,Draws,Losses,Games,Win_Rate\n"
        "1,Alice,25.0,2.0,8,1,1,10,0.8\n"
        "2,Bob,22.5,2.5,5,0,5,10,0.5\n",
        encoding="utf-8",
    )
    return path


def test_cli_prints_table_and_summaries(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    source = _write_sample(tmp_path)

    code = main([str(source), "--histogram", "--totals", "--top", "1", "--compare", "Alice", "Bob"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Showing 2 of 2 players" in out
    assert "Totals: wins=13 draws=1 losses=6" in out
    assert "80-100%" in out
    assert "A: Alice (Rank #1 of 2)" in out
    assert "Win/loss ratio  8.00" in out


def test_cli_exports_sorted_view(tmp_path: Path):
    source = _write_sample(tmp_path)
    output = tmp_path / "out.csv"

    code = main([str(source), "--sort", "Player", "--descending", "--output", str(output)])

    assert code == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert [line.split(",")[1] for line in lines[1:]] == ["Bob", "Alice"]


def test_cli_reports_load_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    code = main([str(tmp_path / "missing.csv")])

    assert code == 1
    assert "Error loading tournament data" in capsys.readouterr().err


def test_cli_reports_unknown_player(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    source = _write_sample(tmp_path)

    code = main([str(source), "--compare", "Alice", "Mallory"])

    assert code == 1
    assert "Select two players" in capsys.readouterr().err


def test_cli_top_takes_a_value_before_the_source(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    source = _write_sample(tmp_path)

    code = main(["--top", "1", str(source)])
    out = capsys.readouterr().out

    assert code == 0
    assert "Top 1 by win rate" in out


def test_cli_top_requires_a_value(tmp_path: Path):
    source = _write_sample(tmp_path)

    with pytest.raises(SystemExit):
        main([str(source), "--top"])
