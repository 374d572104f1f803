"""Column layout of the standings text format."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


DELIMITER = ","


@dataclass(frozen=True)
class ColumnSpec:
    header: str
    attribute: str
    numeric: bool


STANDINGS_COLUMNS: Tuple[ColumnSpec, ...] = (
    ColumnSpec(header="Rank", attribute="rank", numeric=True),
    ColumnSpec(header="Player", attribute="name", numeric=False),
    ColumnSpec(header="Rating_Mu", attribute="rating_mean", numeric=True),
    ColumnSpec(header="Rating_Sigma", attribute="rating_deviation", numeric=True),
    ColumnSpec(header="Wins", attribute="wins", numeric=True),
    ColumnSpec(header="Draws", attribute="draws", numeric=True),
    ColumnSpec(header="Losses", attribute="losses", numeric=True),
    ColumnSpec(header="Games", attribute="games_played", numeric=True),
    ColumnSpec(header="Win_Rate", attribute="win_rate", numeric=True),
)

STANDINGS_HEADER: Tuple[str, ...] = tuple(column.header for column in STANDINGS_COLUMNS)

NUMERIC_HEADERS: frozenset[str] = frozenset(
    column.header for column in STANDINGS_COLUMNS if column.numeric
)

_BY_KEY: Dict[str, ColumnSpec] = {}
for _column in STANDINGS_COLUMNS:
    _BY_KEY[_column.header.lower()] = _column
    _BY_KEY[_column.attribute.lower()] = _column


def iter_columns() -> Iterable[ColumnSpec]:
    """Return the columns in header order."""

    return iter(STANDINGS_COLUMNS)


def find_column(key: str) -> ColumnSpec | None:
    """Resolve a header name or record attribute, ignoring case."""

    return _BY_KEY.get(key.strip().lower())


def get_column(key: str) -> ColumnSpec:
    """Resolve a column, raising KeyError if it is not part of the format."""

    column = find_column(key)
    if column is None:
        raise KeyError(f"Unknown standings column {key!r}")
    return column
