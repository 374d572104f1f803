"""Immutable sort and search state threaded through view operations."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List

from pystandings.config import find_column
from pystandings.models import ParticipantRecord

from .filtering import filter_by_name
from .sorting import sort_records


def _canonical_column(column: str) -> str:
    column_spec = find_column(column)
    return column_spec.attribute if column_spec is not None else column


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction."""

    column: str = "rank"
    ascending: bool = True

    def toggle(self, column: str) -> "SortState":
        """Flip direction on the active column, otherwise switch to ``column`` ascending."""

        target = _canonical_column(column)
        if target == _canonical_column(self.column):
            return SortState(column=target, ascending=not self.ascending)
        return SortState(column=target, ascending=True)


@dataclass(frozen=True)
class ViewState:
    """What the presentation layer currently shows: a sort plus a name query."""

    sort: SortState = field(default_factory=SortState)
    query: str = ""

    def with_sort(self, column: str) -> "ViewState":
        return replace(self, sort=self.sort.toggle(column))

    def with_query(self, query: str) -> "ViewState":
        return replace(self, query=query)

    def apply(self, records: Iterable[ParticipantRecord]) -> List[ParticipantRecord]:
        """Filter then sort ``records``; the input is left untouched."""

        visible = filter_by_name(records, self.query)
        return sort_records(visible, self.sort.column, self.sort.ascending)
