import pytest

from pystandings.config import STANDINGS_HEADER, Settings, get_column, load_settings


def test_header_order_matches_format():
    assert STANDINGS_HEADER == (
        "Rank", "Player", "Rating_Mu", "Rating_Sigma", "Wins", "Draws", "Losses", "Games", "Win_Rate",
    )


def test_get_column_by_header_or_attribute():
    assert get_column("Win_Rate").attribute == "win_rate"
    assert get_column("games_played").header == "Games"
    assert get_column(" player ").numeric is False


def test_get_column_missing_raises():
    with pytest.raises(KeyError):
        get_column("Country")


def test_load_settings_defaults(monkeypatch):
    for name in (
        "PYSTANDINGS_SOURCE",
        "PYSTANDINGS_FETCH_TIMEOUT",
        "PYSTANDINGS_TOP_N",
        "PYSTANDINGS_STRICT_NUMERIC",
        "PYSTANDINGS_EXPORT_FILENAME",
    ):
        monkeypatch.delenv(name, raising=False)

    assert load_settings() == Settings()


def test_load_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PYSTANDINGS_SOURCE", "https://example.com/final_standings.csv")
    monkeypatch.setenv("PYSTANDINGS_FETCH_TIMEOUT", "2.5")
    monkeypatch.setenv("PYSTANDINGS_TOP_N", "5")
    monkeypatch.setenv("PYSTANDINGS_STRICT_NUMERIC", "yes")

    settings = load_settings()
    assert settings.source == "https://example.com/final_standings.csv"
    assert settings.fetch_timeout == 2.5
    assert settings.top_n == 5
    assert settings.strict_numeric is True


def test_load_settings_invalid_values_fall_back(monkeypatch, caplog):
    monkeypatch.setenv("PYSTANDINGS_TOP_N", "ten")
    monkeypatch.setenv("PYSTANDINGS_FETCH_TIMEOUT", "0")
    monkeypatch.setenv("PYSTANDINGS_STRICT_NUMERIC", "maybe")

    settings = load_settings()
    assert settings.top_n == 10
    assert settings.fetch_timeout == pytest.approx(0.1)
    assert settings.strict_numeric is False
    assert "Invalid int for PYSTANDINGS_TOP_N" in caplog.text
