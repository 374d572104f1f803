"""Configuration helpers for the standings format and runtime settings."""

from .columns import (
    DELIMITER,
    NUMERIC_HEADERS,
    STANDINGS_COLUMNS,
    STANDINGS_HEADER,
    ColumnSpec,
    find_column,
    get_column,
    iter_columns,
)
from .settings import Settings, load_settings

__all__ = [
    "DELIMITER",
    "NUMERIC_HEADERS",
    "STANDINGS_COLUMNS",
    "STANDINGS_HEADER",
    "ColumnSpec",
    "Settings",
    "find_column",
    "get_column",
    "iter_columns",
    "load_settings",
]
