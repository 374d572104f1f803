"""In-memory holder for the canonical standings sequence."""

from __future__ import annotations

import logging
from typing import Tuple

import httpx

from pystandings.config import DELIMITER
from pystandings.ingest import StandingsLoadError, fetch_standings_text, parse_standings
from pystandings.models import ParticipantRecord


logger = logging.getLogger(__name__)


class StandingsStore:
    """Keeps the records of the latest load as an immutable tuple.

    Every load replaces the tuple wholesale; a failed load leaves the store
    empty, which callers treat the same as "not loaded yet".
    """

    def __init__(self, *, delimiter: str = DELIMITER, strict: bool = False):
        self._delimiter = delimiter
        self._strict = strict
        self._records: Tuple[ParticipantRecord, ...] = ()
        self._source: str | None = None
        self._loaded = False

    @property
    def records(self) -> Tuple[ParticipantRecord, ...]:
        return self._records

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def source(self) -> str | None:
        return self._source

    def clear(self) -> None:
        self._records = ()
        self._source = None
        self._loaded = False

    def load_text(self, text: str, *, source: str = "<upload>") -> Tuple[ParticipantRecord, ...]:
        """Parse ``text`` and make it the canonical sequence.

        Strict-mode parse errors propagate and leave the previous sequence in
        place.
        """

        records = tuple(parse_standings(text, delimiter=self._delimiter, strict=self._strict))
        self._records = records
        self._source = source
        self._loaded = True
        logger.info("Loaded %s standings records from %s", len(records), source)
        return records

    async def reload(
        self,
        source: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> Tuple[ParticipantRecord, ...]:
        try:
            text = await fetch_standings_text(source, client=client, timeout=timeout)
        except StandingsLoadError as exc:
            logger.error("Error loading standings: %s", exc)
            self.clear()
            raise
        return self.load_text(text, source=source)
