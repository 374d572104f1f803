"""Helpers to parse standings text and emit canonical records."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from pystandings.config import DELIMITER, STANDINGS_COLUMNS, find_column
from pystandings.models import ParticipantRecord


logger = logging.getLogger(__name__)

_NUMERIC_COLUMNS = tuple(column for column in STANDINGS_COLUMNS if column.numeric)

# Plain ASCII decimal or exponent notation; no digit separators or other scripts.
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_BOM = "\ufeff"


class MalformedFieldError(ValueError):
    """Raised in strict mode when a numeric column does not hold a finite number."""

    def __init__(self, *, line: int, column: str, raw: Optional[str]):
        self.line = line
        self.column = column
        self.raw = raw
        super().__init__(f"line {line}: column {column!r} is not a finite number ({raw!r})")


@dataclass(frozen=True)
class ParsedNumber:
    """Outcome of coercing one raw value: either a finite number or an invalid field."""

    value: float
    raw: Optional[str]
    valid: bool

    @classmethod
    def invalid(cls, raw: Optional[str]) -> "ParsedNumber":
        return cls(value=math.nan, raw=raw, valid=False)


def coerce_numeric(raw: Optional[str]) -> ParsedNumber:
    if raw is None:
        return ParsedNumber.invalid(raw)
    text = raw.strip()
    if not _NUMBER_PATTERN.fullmatch(text):
        return ParsedNumber.invalid(raw)
    value = float(text)
    if not math.isfinite(value):
        return ParsedNumber.invalid(raw)
    return ParsedNumber(value=value, raw=raw, valid=True)


class StandingsRow(BaseModel):
    """Raw text values of one data line, keyed by header name."""

    line_number: int = Field(..., ge=1)
    values: Dict[str, Optional[str]]

    @classmethod
    def from_values(cls, header: Sequence[str], values: Sequence[str], *, line_number: int) -> "StandingsRow":
        # Short lines leave the trailing columns missing; surplus values are dropped.
        mapped: Dict[str, Optional[str]] = {}
        for index, name in enumerate(header):
            mapped[name] = values[index] if index < len(values) else None
        return cls(line_number=line_number, values=mapped)


def split_standings_text(text: str, *, delimiter: str = DELIMITER) -> Tuple[List[str], List[StandingsRow]]:
    """Split raw text into its header and raw rows without coercing anything."""

    if text.startswith(_BOM):
        text = text[len(_BOM):]
    stripped = text.strip()
    if not stripped:
        return [], []
    # Records end at "\n" only; a trailing "\r" belongs to the line break.
    lines = [line[:-1] if line.endswith("\r") else line for line in stripped.split("\n")]
    header = [name.strip() for name in lines[0].split(delimiter)]
    rows: List[StandingsRow] = []
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        rows.append(StandingsRow.from_values(header, line.split(delimiter), line_number=line_number))
    return header, rows


def _row_to_record(row: StandingsRow, *, strict: bool) -> ParticipantRecord:
    fields: Dict[str, object] = {}
    invalid: List[str] = []
    extra: Dict[str, Optional[str]] = {}

    for header_name, raw in row.values.items():
        column = find_column(header_name)
        if column is None or column.header != header_name:
            extra[header_name] = raw
            continue
        if not column.numeric:
            fields[column.attribute] = raw
            continue
        parsed = coerce_numeric(raw)
        if not parsed.valid:
            if strict:
                raise MalformedFieldError(line=row.line_number, column=column.header, raw=raw)
            logger.debug(
                "Line %s: %s value %r is not a finite number; keeping NaN",
                row.line_number,
                column.header,
                raw,
            )
            invalid.append(column.attribute)
        fields[column.attribute] = parsed.value

    # Columns absent from the header behave like values missing from a short line.
    for column in _NUMERIC_COLUMNS:
        if column.attribute not in fields:
            if strict:
                raise MalformedFieldError(line=row.line_number, column=column.header, raw=None)
            fields[column.attribute] = math.nan
            invalid.append(column.attribute)

    return ParticipantRecord(**fields, invalid_fields=tuple(invalid), extra=extra)


def rows_to_records(rows: Sequence[StandingsRow], *, strict: bool = False) -> List[ParticipantRecord]:
    return [_row_to_record(row, strict=strict) for row in rows]


def parse_standings(
    text: str,
    *,
    delimiter: str = DELIMITER,
    strict: bool = False,
) -> List[ParticipantRecord]:
    """Parse standings text into records, preserving input order.

    Malformed numeric values become ``nan`` unless ``strict`` is set, in which
    case the first one raises :class:`MalformedFieldError`.
    """

    _, rows = split_standings_text(text, delimiter=delimiter)
    records = rows_to_records(rows, strict=strict)
    incomplete = sum(1 for record in records if not record.is_complete)
    if incomplete:
        logger.debug("Parsed %s records (%s with invalid numeric fields)", len(records), incomplete)
    return records


def load_standings_csv(
    path: Path,
    *,
    delimiter: str = DELIMITER,
    strict: bool = False,
) -> List[ParticipantRecord]:
    return parse_standings(path.read_text(encoding="utf-8"), delimiter=delimiter, strict=strict)

