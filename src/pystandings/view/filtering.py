"""Name search over standings records."""

from __future__ import annotations

from typing import Iterable, List

from pystandings.models import ParticipantRecord


def matches_name(record: ParticipantRecord, query: str) -> bool:
    if not query:
        return True
    if record.name is None:
        return False
    return query.lower() in record.name.lower()


def filter_by_name(records: Iterable[ParticipantRecord], query: str) -> List[ParticipantRecord]:
    """Return records whose name contains ``query``, ignoring case, in input order."""

    return [record for record in records if matches_name(record, query)]
