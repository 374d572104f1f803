"""Delimited-text export of standings records."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, List

from pystandings.config import DELIMITER, STANDINGS_COLUMNS
from pystandings.models import ParticipantRecord


def format_value(value: float | str | None) -> str:
    """Render a single field the way it is expected back on import."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if not math.isfinite(value):
        return "NaN"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _record_line(record: ParticipantRecord, delimiter: str) -> str:
    return delimiter.join(format_value(record.value(column.attribute)) for column in STANDINGS_COLUMNS)


def serialize_records(records: Iterable[ParticipantRecord], *, delimiter: str = DELIMITER) -> str:
    """Convert records to standings text with the fixed header order.

    Values are not quoted or escaped, so a name containing the delimiter will
    not survive a round trip through :func:`pystandings.ingest.parse_standings`.
    """

    lines: List[str] = [delimiter.join(column.header for column in STANDINGS_COLUMNS)]
    lines.extend(_record_line(record, delimiter) for record in records)
    return "\n".join(lines)


def write_standings_csv(path: Path, records: Iterable[ParticipantRecord], *, delimiter: str = DELIMITER) -> None:
    path.write_text(serialize_records(records, delimiter=delimiter), encoding="utf-8")


__all__ = [
    "format_value",
    "serialize_records",
    "write_standings_csv",
]
