"""Stable single-column ordering of standings records."""

from __future__ import annotations

from typing import Iterable, List

from pystandings.config import find_column
from pystandings.models import ParticipantRecord, is_missing


def resolve_sort_attribute(column: str, records: Iterable[ParticipantRecord] = ()) -> str:
    """Map a header name or attribute to the attribute to read from records.

    Columns outside the standings format are accepted when at least one record
    carries them as an extra text column.
    """

    column_spec = find_column(column)
    if column_spec is not None:
        return column_spec.attribute
    for record in records:
        if column in record.extra:
            return column
    raise KeyError(f"Unknown sort column {column!r}")


def _read(record: ParticipantRecord, attribute: str) -> float | str | None:
    try:
        return record.value(attribute)
    except KeyError:
        return None


def _sort_key(value: float | str) -> float | str:
    if isinstance(value, str):
        return value.lower()
    return value


def sort_records(
    records: Iterable[ParticipantRecord],
    column: str,
    ascending: bool = True,
) -> List[ParticipantRecord]:
    """Return a new list ordered by ``column``.

    Text compares case-insensitively. Equal keys keep their input order in
    both directions. Values that cannot be ordered (missing text, NaN) are
    placed after every comparable value, in input order, whatever the
    direction.
    """

    record_list = list(records)
    attribute = resolve_sort_attribute(column, record_list)

    comparable: List[ParticipantRecord] = []
    unordered: List[ParticipantRecord] = []
    for record in record_list:
        if is_missing(_read(record, attribute)):
            unordered.append(record)
        else:
            comparable.append(record)

    # sorted() keeps equal elements in input order even with reverse=True.
    ordered = sorted(
        comparable,
        key=lambda record: _sort_key(_read(record, attribute)),
        reverse=not ascending,
    )
    return ordered + unordered
