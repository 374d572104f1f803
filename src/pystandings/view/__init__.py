"""View utilities (sorting, filtering, export)."""

from .export import format_value, serialize_records, write_standings_csv
from .filtering import filter_by_name, matches_name
from .sorting import resolve_sort_attribute, sort_records
from .state import SortState, ViewState

__all__ = [
    "SortState",
    "ViewState",
    "filter_by_name",
    "format_value",
    "matches_name",
    "resolve_sort_attribute",
    "serialize_records",
    "sort_records",
    "write_standings_csv",
]
