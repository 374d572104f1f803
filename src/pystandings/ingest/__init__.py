"""Input adapters that turn raw standings text into canonical records."""

from .fetch import StandingsLoadError, fetch_standings_text, is_remote_source
from .standings import (
    MalformedFieldError,
    ParsedNumber,
    StandingsRow,
    coerce_numeric,
    load_standings_csv,
    parse_standings,
    rows_to_records,
    split_standings_text,
)

__all__ = [
    "MalformedFieldError",
    "ParsedNumber",
    "StandingsLoadError",
    "StandingsRow",
    "coerce_numeric",
    "fetch_standings_text",
    "is_remote_source",
    "load_standings_csv",
    "parse_standings",
    "rows_to_records",
    "split_standings_text",
]
